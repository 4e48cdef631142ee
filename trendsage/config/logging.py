from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    level: str = Field("INFO", description="Log level name.")
    json_logs: bool = Field(False, alias="json", description="Render log lines as JSON.")

    @classmethod
    def default(cls):
        return LoggingConfig()
