# File: vasa/core/config_manager.py
"""
Centralized configuration management for VAsA.
Loads settings from environment variables and an optional .env file.
"""

import os
import datetime
from pathlib import Path
from typing import List

import pytz
from dotenv import load_dotenv

from vasa.utils.logger import setup_logger

# Load environment variables
load_dotenv()

class Config:
    """Application configuration singleton."""
    
    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from vasa/core/
    
    OUTPUT_DIR = Path(os.getenv("VASA_OUTPUT_DIR", str(BASE_DIR / "output")))
    LOGS_DIR = Path(os.getenv("VASA_LOG_DIR", str(BASE_DIR / "logs")))
    ENV_FILE = BASE_DIR / ".env"
    
    # Application Settings
    TARGET_TIMEZONE = os.getenv("VASA_TIMEZONE", "UTC")
    CURRENCY_SYMBOL = os.getenv("VASA_CURRENCY_SYMBOL", "$")
    
    # Calendar export
    CALENDAR_PRODID = "-//VAsA Planner//EN"
    CALENDAR_DESCRIPTION_PREFIX = "VAsA Planner"
    
    # Planner Settings
    PLANNER_DAYS = 7
    DAY_START_HOUR = 7   # 7 AM
    DAY_END_HOUR = 21    # 9 PM
    
    # Document centre
    ACCEPTED_UPLOAD_TYPES: List[str] = [".doc", ".docx", ".xls", ".xlsx", ".pdf"]
    ALL_CATEGORIES = "All"
    
    @classmethod
    def timezone(cls) -> datetime.tzinfo:
        """Resolve the configured timezone."""
        return pytz.timezone(cls.TARGET_TIMEZONE)
    
    @classmethod
    def now(cls) -> datetime.datetime:
        """Current wall-clock time in the configured timezone."""
        return datetime.datetime.now(cls.timezone())
    
    @classmethod
    def today(cls) -> datetime.date:
        return cls.now().date()
    
    @classmethod
    def planner_hours(cls) -> List[int]:
        """Hour rows shown on the planner, inclusive of the last hour."""
        return list(range(cls.DAY_START_HOUR, cls.DAY_END_HOUR + 1))
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []
        
        if cls.TARGET_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TARGET_TIMEZONE}")
        
        if cls.OUTPUT_DIR.exists() and not cls.OUTPUT_DIR.is_dir():
            errors.append(f"Output path is not a directory: {cls.OUTPUT_DIR}")
        
        if cls.DAY_START_HOUR >= cls.DAY_END_HOUR:
            errors.append("DAY_START_HOUR must be before DAY_END_HOUR")
        
        if errors:
            logger = setup_logger(__name__)
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False
        
        return True
