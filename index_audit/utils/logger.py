import logging
import sys
from typing import Union
from index_audit.config.config import LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL

class CustomLogger:
    def __init__(self, name: str, level: Union[int, str] = LOG_LEVEL):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        
        # Prevent adding duplicate handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            self.logger.addHandler(console_handler)
    
    def info(self, msg, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)
    
    def error(self, msg, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)
    
    def warning(self, msg, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)
    
    def debug(self, msg, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)
    
    def exception(self, msg, *args, **kwargs):
        self.logger.exception(msg, *args, **kwargs)
