from .enums import ExperienceLevel, Role

__all__ = ["ExperienceLevel", "Role"]
