from pathlib import Path
from typing import Optional
from pydantic import BaseModel, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent

class PlotSettings(BaseModel):
    frequency_figsize: tuple[float, float] = (11.0, 5.0)
    chunk_figsize: tuple[float, float] = (18.0, 3.0)
    dpi: PositiveInt = 100

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BYTE_ENTROPY_", env_nested_delimiter="__")

    chunk_size: PositiveInt = 16 * 1024
    read_block_size: PositiveInt = 16 * 1024
    bar_width: PositiveInt = 40
    output_directory: Path = Path("entropy_output")
    log_file: str = "logs/byte_entropy.log"
    save_log: bool = False
    log_level: str = "WARNING"
    max_processes: Optional[PositiveInt] = 8
    plot: PlotSettings = PlotSettings()

settings = Settings()
