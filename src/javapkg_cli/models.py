from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ResolverSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source_roots: List[str] = Field(default_factory=list)
    classpath: List[str] = Field(default_factory=list)
    default_package: str = Field("java.lang", pattern=r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")
    strict_parse: bool = True
    log_level: Optional[LogLevel] = None


class ReferenceReport(BaseModel):
    class_name: str
    package_name: Optional[str] = None
    resolved: bool = False
    strategy: Optional[str] = None


class UnitReport(BaseModel):
    path: str
    package_name: Optional[str] = None
    primary_type: Optional[str] = None
    secondary_types: List[str] = Field(default_factory=list)
    generics: List[str] = Field(default_factory=list)
    imports: List[str] = Field(default_factory=list)
    references: List[ReferenceReport] = Field(default_factory=list)


class ResolveReport(BaseModel):
    packages: List[str]
    units: List[UnitReport] = Field(default_factory=list)
    unresolved: List[str] = Field(default_factory=list)
    failed_files: List[str] = Field(default_factory=list)
