"""
Plant identifier: upload a plant photo, get its identity, health and care tips.
"""
from .app import PlantIdentifierApp
from .config import PlantIdentifierConfig
from .schemas import PlantInfo

__all__ = ["PlantIdentifierApp", "PlantIdentifierConfig", "PlantInfo"]
