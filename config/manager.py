"""Gerenciador de configuração: carregar, salvar e validar.

Usa ruamel.yaml para serialização YAML com comentários.
"""

import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich import box
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import ENV_BASE_URL, default_client_config
from config.schema import ClientConfig

logger = logging.getLogger(__name__)
console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# Gerenciador Universitário — configuração do cliente
# Criado: {date.today().isoformat()}
# ============================================
"""

_FIELD_COMMENTS = {
    "api_base_url": "Origem da API (ex.: http://localhost:8080)",
    "timeout_seconds": "null = sem timeout",
    "auto_subject_year": "Ano das matérias vinculadas ao cadastrar aluno",
    "auto_subject_count": "Máximo de matérias vinculadas automaticamente",
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "client_config.yaml"

    def exists(self) -> bool:
        return self.DEFAULT_CONFIG.exists()

    # ─── Carregar ───

    def load(self, path: Optional[Path] = None) -> ClientConfig:
        """Carrega a config do YAML (ou os padrões) e aplica o ambiente.

        Sem arquivo, usa ``default_client_config()``. ``UNI_API_BASE_URL``
        sobrepõe a URL base.
        """
        target = path or self.DEFAULT_CONFIG
        if target.exists():
            config = self._load_file(target)
        elif path is not None:
            raise FileNotFoundError(f"Arquivo de configuração não encontrado: {target}")
        else:
            logger.debug(f"{target} não existe, usando configuração padrão")
            config = default_client_config()

        env_url = os.environ.get(ENV_BASE_URL)
        if env_url:
            logger.debug(f"{ENV_BASE_URL} sobrepõe api_base_url")
            config = ClientConfig.model_validate(
                {**config.model_dump(), "api_base_url": env_url}
            )
        return config

    def _load_file(self, target: Path) -> ClientConfig:
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return ClientConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Arquivo de configuração inválido: {target}\n"
                f"Erro do Pydantic: {e}"
            ) from e

    # ─── Salvar ───

    def save(self, config: ClientConfig, path: Optional[Path] = None) -> Path:
        """Salva a config como YAML comentado."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = CommentedMap(json.loads(config.model_dump_json()))
        for key, comment in _FIELD_COMMENTS.items():
            if key in data:
                data.yaml_add_eol_comment(comment, key)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)
        logger.info(f"Configuração salva: {target}")
        return target

    def set_base_url(self, url: str) -> ClientConfig:
        """Altera apenas a URL base e persiste."""
        current = self._load_file(self.DEFAULT_CONFIG) if self.exists() \
            else default_client_config()
        config = ClientConfig.model_validate({**current.model_dump(), "api_base_url": url})
        self.save(config)
        return config

    # ─── Exibir ───

    def show(self, config: ClientConfig) -> None:
        table = Table(title="Configuração", box=box.ROUNDED)
        table.add_column("Parâmetro", style="bold")
        table.add_column("Valor")
        for k, v in config.model_dump().items():
            table.add_row(k, "—" if v is None else str(v))
        console.print(table)
        source = self.DEFAULT_CONFIG if self.exists() else "padrões"
        console.print(f"[dim]Origem: {source}[/dim]")
