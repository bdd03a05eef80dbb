"""
Assuo configuration

Passed explicitly to the resolver, client and workflow constructors.
"""
from typing import Optional
from pydantic import BaseModel, Field


class AssuoConfig(BaseModel):
    """Runtime settings for resolving and applying patch documents"""
    timeout: Optional[float] = Field(None, gt=0, description="Seconds before a URL fetch gives up (None = wait forever)")
    max_depth: int = Field(default=16, ge=1, description="Maximum nesting of assuo-url / assuo-file documents")
    default_document: str = Field(default="assuo.toml", description="Document the CLI reads when no input is given")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "timeout": 10,
                "max_depth": 16,
                "default_document": "assuo.toml"
            }
        }
