from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from structfactory.core.validation import check_field_names, check_type_name, is_type_name

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FactoryOptions(BaseModel):
    # Populate unsupplied trailing fields with None; when False they stay
    # unpopulated until written by name.
    fill_missing: bool = True

    # Bind named types in the registry
    register_named: bool = True

    # Applied by cli.main when a declaration file is built; RecordFactory
    # leaves logging configuration to the caller.
    log_level: LogLevel = "INFO"


class RecordDeclaration(BaseModel):
    name: Optional[str] = None
    fields: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_identifiers(self) -> "RecordDeclaration":
        if self.name is not None:
            if not is_type_name(self.name):
                raise ValueError(f"name {self.name!r} must start with an uppercase letter")
            self.name = check_type_name(self.name)
        elif self.fields and is_type_name(self.fields[0]):
            raise ValueError(f"first field {self.fields[0]!r} would be read as a type name; set 'name' instead")
        check_field_names(self.fields, self.name)
        return self

    def to_fields(self) -> Tuple[str, ...]:
        """Positional declaration accepted by ``RecordFactory.create``."""
        head = (self.name,) if self.name else ()
        return head + tuple(self.fields)


class FactoryConfig(BaseModel):
    options: FactoryOptions = Field(default_factory=FactoryOptions)
    records: List[RecordDeclaration]

    @model_validator(mode="after")
    def _validate_records(self) -> "FactoryConfig":
        if not self.records:
            raise ValueError("records must declare at least one record type")
        names = [r.name for r in self.records if r.name]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"record names declared more than once: {duplicates}")
        return self
