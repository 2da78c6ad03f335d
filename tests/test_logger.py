# tests/test_logger.py

import logging
import os
import shutil
import tempfile

from segtree.utils.logger import get_logger, setup_logger


def test_get_logger():
    """get_logger attaches one console handler, however often it is called"""
    logger = get_logger('segtree.test_get_logger', level=logging.DEBUG)
    again = get_logger('segtree.test_get_logger', level=logging.DEBUG)

    assert logger is again
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logger_writes_file():
    """Test basic logger functionality"""
    # Create temporary directory for logs
    temp_dir = tempfile.mkdtemp()

    try:
        log_file = os.path.join(temp_dir, 'nested', 'demo.log')
        logger = setup_logger('segtree.test_setup_logger', log_file)
        logger.info("Set index 0 to 4")

        for handler in logger.handlers:
            handler.flush()

        # Parent directory is created on demand
        assert os.path.exists(log_file)
        with open(log_file) as f:
            contents = f.read()
        assert 'segtree.test_setup_logger - INFO - Set index 0 to 4' in contents

        # Calling again replaces the handlers instead of stacking them
        logger = setup_logger('segtree.test_setup_logger', log_file)
        assert len(logger.handlers) == 2

        logger = setup_logger('segtree.test_setup_logger')
        assert len(logger.handlers) == 1

    finally:
        # Clean up
        for handler in list(logging.getLogger('segtree.test_setup_logger').handlers):
            handler.close()
        shutil.rmtree(temp_dir)


if __name__ == '__main__':
    test_get_logger()
    test_setup_logger_writes_file()
