"""Tests for logging, metrics and I/O utilities."""

import logging
from pathlib import Path

import pytest
import numpy as np
from robustfit.utils.io_handler import JSONWriter
from robustfit.utils.logger import (CONSOLE_HANDLER, FILE_HANDLER, create_session_log_file,
                                    setup_logger)
from robustfit.utils.metrics import FitMetrics


class TestLogger:
    """Test logger setup."""

    def test_setup_logger(self):
        """Test console logger creation."""
        logger = setup_logger('robustfit.test.console', logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_no_duplicates(self):
        """Test that calling setup twice does not stack handlers."""
        setup_logger('robustfit.test.repeat')
        logger = setup_logger('robustfit.test.repeat')
        assert len(logger.handlers) == 1

    def test_handler_names(self, tmp_path):
        """Test that handlers added by setup are named and replaced together."""
        setup_logger('robustfit.test.names', log_file=str(tmp_path / 'a.log'))
        logger = setup_logger('robustfit.test.names', log_file=str(tmp_path / 'b.log'))
        names = sorted(handler.get_name() for handler in logger.handlers)
        assert names == [CONSOLE_HANDLER, FILE_HANDLER]

    def test_foreign_handler_kept(self):
        """Test that handlers added elsewhere survive a repeated setup."""
        logger = logging.getLogger('robustfit.test.foreign')
        other = logging.NullHandler()
        logger.addHandler(other)
        setup_logger('robustfit.test.foreign')
        assert other in logger.handlers
        assert len(logger.handlers) == 2

    def test_string_level(self):
        """Test level names from configuration."""
        logger = setup_logger('robustfit.test.level', 'warning')
        assert logger.level == logging.WARNING

    def test_log_file(self, tmp_path):
        """Test file handler creation."""
        log_file = tmp_path / 'logs' / 'fit.log'
        logger = setup_logger('robustfit.test.file', logging.INFO, str(log_file))
        logger.info("fitted")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert 'fitted' in log_file.read_text()

    def test_create_session_log_file(self, tmp_path):
        """Test timestamped log path."""
        path = create_session_log_file(str(tmp_path / 'logs'))
        assert (tmp_path / 'logs').is_dir()
        assert Path(path).name.startswith('robustfit_')
        assert path.endswith('.log')


class TestFitMetrics:
    """Test fit quality metrics."""

    def test_residual_summary(self):
        """Test residual statistics."""
        summary = FitMetrics.residual_summary([0, 1, 2, 3], [1, 3, 5, 11], (1.0, 2.0))
        assert summary['mean_error'] == pytest.approx(1.0)
        assert summary['median_error'] == pytest.approx(0.0)
        assert summary['max_error'] == pytest.approx(4.0)
        assert summary['rms_error'] == pytest.approx(2.0)

    def test_parameter_error(self):
        """Test distance between parameter pairs."""
        assert FitMetrics.parameter_error((1.0, 2.0), (1.0, 2.0)) == 0.0
        assert FitMetrics.parameter_error((4.0, 6.0), (1.0, 2.0)) == pytest.approx(5.0)


class TestJSONWriter:
    """Test JSON result files."""

    def test_save_and_load(self, tmp_path):
        """Test writing results containing numpy values."""
        path = tmp_path / 'out' / 'result.json'
        JSONWriter.save_results({
            'model': (1.0, 2.0),
            'inliers': np.array([0, 2, 3]),
            'threshold': np.float64(0.5)
        }, str(path))

        loaded = JSONWriter.load_results(str(path))
        assert loaded == {'model': [1.0, 2.0], 'inliers': [0, 2, 3], 'threshold': 0.5}
