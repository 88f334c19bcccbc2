"""
Pydantic schemas: Request models for the API.
"""

from pydantic import BaseModel, Field

from statusvault.core.interfaces.assistant import ChatRole


class IngestRequest(BaseModel):
    text: str = Field(..., description="Recognized text of the document image")
    image_ref: str | None = Field(None, description="Reference to the stored image")


class ClassifyRequest(BaseModel):
    text: str


class SupersedeRequest(BaseModel):
    superseded_by: str = Field(..., description="Id of the newer document")


class ChatTurn(BaseModel):
    role: ChatRole
    content: str


class ChatRequest(BaseModel):
    message: str
    history: list[ChatTurn] = []
