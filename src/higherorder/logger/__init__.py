from higherorder.logger.logger import logger, package_handler, setup_logger

__all__ = ["logger", "package_handler", "setup_logger"]
