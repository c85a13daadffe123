"""Injection domain models.

Pydantic models passed between the analyzer, the naming strategies and
the engine, plus the per-file result handed back to callers.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SiblingPosition(BaseModel):
    """Rank of an element among same-named siblings under one parent."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="0-based rank among same-named siblings")
    total: int = Field(ge=1, description="Number of same-named siblings")


class ElementContext(BaseModel):
    """Contextual facts gathered for one markup-opening element."""

    model_config = ConfigDict(frozen=True)

    element_name: str = Field(description="Tag name, possibly dotted (Namespace.Member)")
    file_path: str = Field(description="Forward-slash path of the source file")
    line_number: int = Field(ge=1, description="1-based line of the opening tag")
    column: int = Field(default=0, ge=0, description="0-based column of the opening tag")
    is_inside_iteration: bool = False
    iteration_key: str | None = Field(default=None, description="Literal key value")
    iteration_key_expression: str | None = Field(
        default=None,
        description="Dotted key expression re-evaluated at render time (item.id)",
    )
    iteration_index: int | None = None
    descriptor: str | None = Field(default=None, description="Semantic hint (placeholder, alt, text)")
    component_path: tuple[str, ...] | None = None
    static_class_name_hint: str | None = None
    sibling_position: SiblingPosition | None = None

    @model_validator(mode="after")
    def check_iteration_fields(self) -> "ElementContext":
        """Iteration key and index only make sense inside an iteration."""
        has_iteration_data = (
            self.iteration_key is not None
            or self.iteration_key_expression is not None
            or self.iteration_index is not None
        )
        if has_iteration_data and not self.is_inside_iteration:
            raise ValueError("iteration key/index require is_inside_iteration=True")
        return self


class GeneratedAttribute(BaseModel):
    """Attribute text ready for insertion plus its plain identifier value."""

    model_config = ConfigDict(frozen=True)

    attribute_text: str = Field(description='Literal attribute, e.g. data-testid="qa_x"')
    identifier: str = Field(description="Plain identifier used for uniqueness bookkeeping")


class ErrorRecord(BaseModel):
    """A failure attached to one file's result."""

    kind: Literal["parse_failure", "processing_failure"]
    message: str
    file_path: str


class TransformResult(BaseModel):
    """Outcome of one injection pass over one file."""

    code: str
    injected_count: int = 0
    error: ErrorRecord | None = None
