# This module configures logging for tile_explorer modules

# To use it, set up the following in the top of your module
# note you can control logger.level at module level
# if logger.level is not set in the module, the level is set here
#
# import logging
# from .explorer_logger import Logger
# logger = logging.getLogger(__name__)
# #logger.level = logging.DEBUG
# LOGGER = Logger()
#

import logging

log_level = logging.INFO

class Logger:
  def __init__(self):
    logging.basicConfig (
        level=log_level,
        format='%(asctime)s %(levelname)s tile_explorer %(module)s:%(lineno)d: %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
