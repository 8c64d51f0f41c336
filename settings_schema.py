from pydantic import BaseModel, Field, ValidationError


class SettingsSchema(BaseModel):
    log_file: str = "log.txt"
    display_width: int = Field(default=100, ge=20)
    menu_delay: float = Field(default=2.0, ge=0.0)
    clear_screen: bool = True


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))
