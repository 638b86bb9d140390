import logging
def get_logger(name:str="cachesim"):
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    return logging.getLogger(name)
