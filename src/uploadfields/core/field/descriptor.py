#!/usr/bin/env python3
"""
Purpose:
    Pydantic model for the form descriptor handed to the host's form toolkit
    for one upload field.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from uploadfields.core.constants import DESCRIPTOR_SECTION
from uploadfields.core.field.options import OptionTree


class Widget(str, Enum):
    """Presentation the host should use for a field."""
    SELECT = "select"
    MULTISELECT = "multiselect"
    TEXT = "text"
    TEXTAREA = "textarea"


class FormFieldDescriptor(BaseModel):
    """
    Configuration for one form widget.

    Common keys: name, fieldname, label, section, widget, value
    Type-specific keys (omitted when unset):
      - select/multiselect/category: options
      - text/textarea:               default
      - textarea:                    rows
    """

    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    name: str = Field(..., description="Request parameter name (the field key).")
    fieldname: str = Field(..., description="Form field name (the field key).")
    label: str = Field(..., description="Display label with trailing colon.")
    section: str = Field(default=DESCRIPTOR_SECTION, description="Form section.")
    widget: Widget = Field(..., description="Widget kind.")
    options: Optional[OptionTree] = Field(default=None, description="Choices, label -> value or group.")
    default: Optional[str] = Field(default=None, description="Initial text.")
    rows: Optional[int] = Field(default=None, ge=1, description="Visible rows for multi-line text.")
    value: Union[str, List[str]] = Field(default="", description="Initial submitted value.")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for the host, without unset type-specific keys."""
        return self.model_dump(mode="json", exclude_none=True)
