"""Integration tests for the complete fitting pipeline."""

import numpy as np
from robustfit import robust_linear_fit
from robustfit.config import load_config
from robustfit.core import RobustLinearFitter
from robustfit.utils.io_handler import JSONWriter


class TestIntegration:
    """Test complete fitting pipeline."""

    def test_noisy_line_pipeline(self):
        """Test robust fitting on a noisy line with gross outliers."""
        rng = np.random.default_rng(42)
        x = np.linspace(0, 100, 200)
        y = 0.75 * x + 10 + rng.normal(0, 0.2, 200)
        bad = rng.choice(200, 20, replace=False)
        y[bad] += rng.choice([-1, 1], 20) * rng.uniform(20, 60, 20)

        result = robust_linear_fit(x, y, minimal_sample_size=2,
                                   distance_threshold=2.0, random_state=7)
        assert set(bad) <= set(result["outliers"])
        assert len(result["outliers"]) <= 40
        assert abs(result["model"][1] - 0.75) < 0.02
        assert abs(result["model"][0] - 10) < 0.5

    def test_config_file_to_json_pipeline(self, tmp_path):
        """Test config loading, fitting and result export together."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("ransac:\n  target_probability: 0.999\n  max_trials: 200\n")
        config = load_config(config_path)

        x = np.arange(20, dtype=float)
        y = 2 * x + 1
        y[[1, 7, 12, 18]] = [0.0, 50.0, 1.0, 150.0]

        result = RobustLinearFitter(config).fit(x, y, minimal_sample_size=2,
                                                distance_threshold=0.5, random_state=0)
        assert result["trials"] <= 200

        output = tmp_path / "result.json"
        JSONWriter.save_results(result, str(output))
        loaded = JSONWriter.load_results(str(output))

        assert loaded["outliers"] == [1, 7, 12, 18]
        assert loaded["inliers"] == [i for i in range(20) if i not in (1, 7, 12, 18)]
        np.testing.assert_allclose(loaded["model"], [1.0, 2.0], atol=1e-9)
        assert loaded["refit_succeeded"] is True
