"""Configuration for sysprompt"""
import os
from dotenv import load_dotenv

from .core.config_model import CONFIG_DIR_NAME, SYSTEM_MD_FILENAME

load_dotenv()

class Config:
    """Process-level settings"""

    # Override/cache file lives at ~/<CONFIG_DIR_NAME>/<SYSTEM_MD_FILENAME>
    CONFIG_DIR_NAME = CONFIG_DIR_NAME
    SYSTEM_MD_FILENAME = SYSTEM_MD_FILENAME

    # Environment variable names
    SYSTEM_MD_VAR = "GEMINI_SYSTEM_MD"
    WRITE_SYSTEM_MD_VAR = "GEMINI_WRITE_SYSTEM_MD"
    SANDBOX_VAR = "SANDBOX"

    # Value of SANDBOX that identifies the macOS seatbelt profile
    SEATBELT_SANDBOX = "sandbox-exec"

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

config = Config()
