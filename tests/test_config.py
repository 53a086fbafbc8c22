"""Testes da configuração do cliente e dos modelos de dados."""

from pathlib import Path

import pytest

from config.defaults import ENV_BASE_URL, default_client_config
from config.manager import ConfigManager
from config.schema import ClientConfig
from models import Shift, Student, StudentCreate, Subject, subject_refs


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv(ENV_BASE_URL, raising=False)


def _manager(tmp_path: Path) -> ConfigManager:
    mgr = ConfigManager()
    mgr.CONFIG_DIR = tmp_path
    mgr.DEFAULT_CONFIG = tmp_path / "client_config.yaml"
    return mgr


# ─── PADRÕES E VALIDAÇÃO ──────────────────────────────────────────────────────

class TestClientConfig:
    def test_defaults(self):
        """Padrão: API local, sem timeout, 5 matérias do 1º ano."""
        config = default_client_config()
        assert config.api_base_url == "http://localhost:8080"
        assert config.timeout_seconds is None
        assert config.auto_subject_year == 1
        assert config.auto_subject_count == 5

    def test_trailing_slash_stripped(self):
        assert ClientConfig(api_base_url="http://api:8080/").api_base_url == "http://api:8080"

    def test_invalid_scheme_raises(self):
        with pytest.raises(Exception):
            ClientConfig(api_base_url="localhost:8080")

    def test_negative_timeout_raises(self):
        with pytest.raises(Exception):
            ClientConfig(timeout_seconds=-1)


# ─── YAML SALVAR / CARREGAR ───────────────────────────────────────────────────

class TestConfigManager:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Salvar e carregar devolve a mesma configuração."""
        mgr = _manager(tmp_path)
        config = ClientConfig(api_base_url="https://uni.example.org",
                              timeout_seconds=12.5, auto_subject_count=3)
        mgr.save(config)
        assert mgr.DEFAULT_CONFIG.exists()
        assert mgr.load() == config

    def test_missing_default_file_uses_defaults(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        assert mgr.exists() is False
        assert mgr.load() == default_client_config()

    def test_load_explicit_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            _manager(tmp_path).load(tmp_path / "not_there.yaml")

    def test_invalid_file_raises_value_error(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("api_base_url: ftp://x\n", encoding="utf-8")
        with pytest.raises(ValueError):
            mgr.load()

    def test_env_overrides_base_url(self, tmp_path: Path, monkeypatch):
        mgr = _manager(tmp_path)
        mgr.save(ClientConfig(api_base_url="http://arquivo:8080"))
        monkeypatch.setenv(ENV_BASE_URL, "http://ambiente:9000/")
        assert mgr.load().api_base_url == "http://ambiente:9000"

    def test_set_base_url_persists(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.set_base_url("http://nova:8080")
        assert mgr.load().api_base_url == "http://nova:8080"
        assert mgr.load().auto_subject_count == 5


# ─── MODELOS ──────────────────────────────────────────────────────────────────

class TestModels:
    def test_student_null_subjects(self):
        s = Student.model_validate({"id": 1, "enrollment": "20240001", "name": "Ana",
                                    "current_year": 1, "shift": "M", "subjects": None})
        assert s.id == "1"
        assert s.subjects == []

    def test_student_rejects_unknown_shift(self):
        with pytest.raises(Exception):
            Student.model_validate({"id": "1", "enrollment": "e", "name": "Ana",
                                    "current_year": 1, "shift": "X"})

    def test_shift_labels(self):
        assert [s.label for s in Shift] == ["Manhã", "Tarde", "Noite"]

    def test_subject_year_positive(self):
        with pytest.raises(Exception):
            Subject(id="1", name="Cálculo", year=0)

    def test_subject_refs_deduplicated(self):
        refs = subject_refs(["3", 1, "3", "2", "1"])
        assert [r.id for r in refs] == ["3", "1", "2"]

    def test_create_payload_serialization(self):
        payload = StudentCreate(name="Ana", current_year=1, shift=Shift.EVENING,
                                subjects=subject_refs(["10"]))
        assert payload.model_dump(mode="json") == {
            "name": "Ana", "current_year": 1, "shift": "N", "subjects": [{"id": "10"}]}
