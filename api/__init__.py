"""Camada de acesso à API HTTP da universidade (httpx, assíncrona)."""

from api.errors import ApiError, InvalidResponseError, RequestError, TransportError
from api.resource_client import ResourceClient
from api.association_client import AssociationClient
from api.session import UniversityApi

__all__ = [
    "ApiError",
    "InvalidResponseError",
    "RequestError",
    "TransportError",
    "ResourceClient",
    "AssociationClient",
    "UniversityApi",
]
