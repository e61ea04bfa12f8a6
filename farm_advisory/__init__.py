"""
Farm Advisory - Weather-Driven Agronomic Advisory Engine
Version: 1.0.0
"""

__version__ = "1.0.0"

# Core advisories
from .codes import get_background_category, get_icon_category, get_weather_description
from .advisory import get_farming_tip, get_irrigation_need, get_pest_risk, get_spray_advisory
from .crops import CROPS, get_crop_precautions
from .work_hours import get_best_work_hours
from .models import (
    CropPrecaution, CropProfile, CurrentConditions, DailySample, FarmingTip, HourlySample,
    IrrigationNeed, Location, PestRisk, Severity, SprayWindow, WeatherSnapshot, WorkWindow,
)
from .report import AdvisoryReport, build_report

__all__ = [
    # Classifier
    'get_weather_description', 'get_icon_category', 'get_background_category',
    # Advisories
    'get_farming_tip', 'get_spray_advisory', 'get_irrigation_need', 'get_pest_risk',
    'get_crop_precautions', 'get_best_work_hours', 'build_report', 'AdvisoryReport',
    # Data model
    'WeatherSnapshot', 'CurrentConditions', 'HourlySample', 'DailySample', 'Location',
    'FarmingTip', 'SprayWindow', 'IrrigationNeed', 'PestRisk', 'CropPrecaution',
    'WorkWindow', 'Severity', 'CropProfile', 'CROPS',
]
