"""Configuração do cliente (Pydantic + ruamel.yaml)."""
