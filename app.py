import sys

from loguru import logger

from scentgraph.api import create_app
from scentgraph.config import settings
from scentgraph.sources.csv_source import CsvRecordSource

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Serving perfume note graphs from {settings.data_path}")
source = CsvRecordSource(settings.data_path)
app = create_app(source=source)
