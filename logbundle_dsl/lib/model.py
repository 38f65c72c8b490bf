"""
Pydantic schema of a bundle-definition file.

A definition file mirrors an annotated Java logging interface:

    package: org.apache.activemq.artemis.core.server
    imports:
      - org.apache.activemq.artemis.api.core.ActiveMQIllegalStateException
    types:
      - name: org.apache.activemq.artemis.api.core.ActiveMQIllegalStateException
        extends: java.lang.IllegalStateException
    interfaces:
      - name: ActiveMQServerLogger
        logBundle:
          projectCode: AMQ
        methods:
          - name: started
            logMessage: {id: 101, value: started, level: INFO}

Per-object checks live here as field validators; checks that need the whole
file (unique names, hierarchy cycles) live in validation/.
"""

import re
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from logbundle_dsl.lib.descriptors import Severity

JAVA_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
JAVA_TYPE_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*(\.[A-Za-z_$][A-Za-z0-9_$]*)*(\[\])*$")

# "LogMessage.Level.INFO" and "Level.INFO" are accepted as written in Java sources
_LEVEL_PREFIXES = ("LogMessage.Level.", "Level.")


def _check_identifier(value: str) -> str:
    if not JAVA_IDENTIFIER.match(value):
        raise ValueError(f"'{value}' is not a valid Java identifier")
    return value


def _check_type_name(value: str) -> str:
    if not JAVA_TYPE_NAME.match(value):
        raise ValueError(f"'{value}' is not a valid Java type name")
    return value


JavaIdentifier = Annotated[str, AfterValidator(_check_identifier)]
JavaTypeName = Annotated[str, AfterValidator(_check_type_name)]


class _Spec(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class LogBundleSpec(_Spec):
    project_code: str = Field(alias="projectCode")


class MessageSpec(_Spec):
    id: int
    value: str


class LogMessageSpec(_Spec):
    id: int
    value: str
    level: Severity

    @field_validator("level", mode="before")
    @classmethod
    def _strip_level_prefix(cls, value):
        if isinstance(value, str):
            value = value.strip()
            for prefix in _LEVEL_PREFIXES:
                if value.startswith(prefix):
                    value = value[len(prefix):]
                    break
            return value.upper()
        return value


class ParameterSpec(_Spec):
    name: JavaIdentifier
    type: JavaTypeName


class MethodSpec(_Spec):
    name: JavaIdentifier
    returns: JavaTypeName = "void"
    parameters: List[ParameterSpec] = Field(default_factory=list)
    message: Optional[MessageSpec] = None
    log_message: Optional[LogMessageSpec] = Field(default=None, alias="logMessage")
    get_logger: bool = Field(default=False, alias="getLogger")

    @property
    def annotation_count(self) -> int:
        return sum((self.message is not None, self.log_message is not None, self.get_logger))


class InterfaceSpec(_Spec):
    name: JavaIdentifier
    log_bundle: Optional[LogBundleSpec] = Field(default=None, alias="logBundle")
    methods: List[MethodSpec] = Field(default_factory=list)


class TypeDeclSpec(_Spec):
    """A class known to the resolver, with its declared superclass."""
    name: JavaTypeName
    extends: Optional[JavaTypeName] = None


class BundleFileSpec(_Spec):
    package: str = ""
    include: List[str] = Field(default_factory=list)
    imports: List[JavaTypeName] = Field(default_factory=list)
    types: List[TypeDeclSpec] = Field(default_factory=list)
    interfaces: List[InterfaceSpec] = Field(default_factory=list)

    @field_validator("package")
    @classmethod
    def _check_package(cls, value: str) -> str:
        if value and not JAVA_TYPE_NAME.match(value):
            raise ValueError(f"'{value}' is not a valid Java package name")
        return value

    @property
    def bundles(self) -> List[InterfaceSpec]:
        """Interfaces that request generation (carry a logBundle block)."""
        return [i for i in self.interfaces if i.log_bundle is not None]
