from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Data settings
    data_path: str = "data/top_7_filtered_perfumes.csv"

    # Web server settings
    templates_dir: Path = Path(__file__).parent / "web" / "templates"

    # Layout settings
    label_offset: float = 20.0
    overview_width: int = 800
    overview_height: int = 800
    brand_width: int = 500
    brand_height: int = 500

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
