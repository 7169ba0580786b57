from loguru import logger
import time
from functools import wraps

def timeit(func):
    """
    Decorator that logs how long the decorated call took, including failed calls.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.debug(f"{func.__qualname__} finished in {elapsed:.6f}s")
    return wrapper
