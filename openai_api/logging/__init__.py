from openai_api.logging.logger import JSONFormatter, setup_logging

__all__ = ["JSONFormatter", "setup_logging"]
