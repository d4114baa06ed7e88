"""Pydantic schemas for the client resources."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from ..models.client import ClientStatus
from .common import APIModel, PaginatedResponse


class ClientBase(APIModel):
    """Attributes shared by create and read operations."""

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=254)
    phone: str = Field(..., max_length=40)
    address: str
    city: str = Field(..., max_length=120)
    zip_code: str = Field(..., max_length=20)
    cpf_cnpj: str = Field(..., max_length=20)
    notes: Optional[str] = None


class ClientCreate(ClientBase):
    """Schema used when creating a client; new clients start active."""

    pass


class ClientUpdate(APIModel):
    """Schema used when updating an existing client."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, min_length=3, max_length=254)
    phone: Optional[str] = Field(default=None, max_length=40)
    address: Optional[str] = None
    city: Optional[str] = Field(default=None, max_length=120)
    zip_code: Optional[str] = Field(default=None, max_length=20)
    cpf_cnpj: Optional[str] = Field(default=None, max_length=20)
    status: Optional[ClientStatus] = None
    notes: Optional[str] = None


class ClientRead(ClientBase):
    """Schema used when returning client data."""

    id: str
    status: ClientStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ClientListResponse(PaginatedResponse[ClientRead]):
    pass


class ClientStats(APIModel):
    total: int = Field(..., ge=0)
    active: int = Field(..., ge=0)
    inactive: int = Field(..., ge=0)
