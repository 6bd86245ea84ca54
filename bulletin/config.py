import logging
import os
import tempfile

LOG_LEVEL = os.getenv('BULLETIN_LOG_LEVEL', 'WARNING')
LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'

DEFAULT_TOPIC_NAME = 'Random Message'

GRAPH_FOLDER = os.getenv('BULLETIN_GRAPH_FOLDER') or tempfile.gettempdir()
GRAPH_LAYOUT = 'dot'


def configure_logging(level=None):
    """ Set up root logging for scripts. The library itself never adds handlers """
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
