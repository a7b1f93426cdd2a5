import json
from pathlib import Path
from typing import Dict, Any, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Global configuration settings for the load-test report generator."""

    output_dir: Path = Path(".")
    output_filename: str = "output.png"
    system_a_label: str = "Golang"
    system_b_label: str = "Node.js"
    system_a_color: str = "#0000ff"
    system_b_color: str = "#008000"
    line_chart_alignment: Literal["bucket", "index"] = "bucket"
    canvas_headline: Literal["line_chart", "success_rate"] = "line_chart"
    keep_intermediate_charts: bool = False
    chart_dpi: int = 100
    summary_csv_path: Optional[Path] = None
    log_level: str = "INFO"
    library_log_levels: Dict[str, str] = {
        "matplotlib": "WARNING",
        "matplotlib.font_manager": "WARNING",
        "PIL": "WARNING"
    }

    model_config = SettingsConfigDict(
        env_prefix='LOAD_REPORT_',
    )

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_filename

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path("config.json")
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Convert path settings to Path if they are strings
                for key in ("output_dir", "summary_csv_path"):
                    if config.get(key) is not None:
                        config[key] = Path(config[key])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
