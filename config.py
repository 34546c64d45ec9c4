"""
Configuration settings for the signature generator.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, fields


@dataclass
class Settings:
    """Server and form-default configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Values pre-filled in the form
    DEFAULT_NAME: str = "Alex Johnson"
    DEFAULT_TITLE: str = "Senior Product Manager"
    DEFAULT_EMAIL: str = "alex.johnson@example.com"
    DEFAULT_PHONE: str = "+1 (555) 123-4567"
    DEFAULT_WEBSITE: str = "example.com"
    DEFAULT_LOGO_URL: str = "https://via.placeholder.com/96x96.png?text=Logo"
    DEFAULT_LINKEDIN_URL: str = "https://www.linkedin.com/in/example"
    DEFAULT_ACCENT_HUE: int = 229

    def __post_init__(self):
        """Load from environment variables"""
        for f in fields(self):
            env_value = os.getenv(f.name)
            if env_value is None:
                continue
            if f.type in (bool, "bool"):
                setattr(self, f.name, env_value.lower() in ("true", "1", "yes"))
            elif f.type in (int, "int"):
                setattr(self, f.name, int(env_value))
            else:
                setattr(self, f.name, env_value)
