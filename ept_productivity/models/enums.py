from enum import Enum


class ExperienceLevel(str, Enum):
    BEGINNER = "Beginner"
    SEASONED = "Seasoned"
    EXPERT = "Expert"


class Role(str, Enum):
    SERVICE_AGENT = "Service Agent"
    SALES_DEVELOPMENT_REP = "Sales Development Rep"
    ACCOUNT_EXECUTIVE = "Account Executive"
