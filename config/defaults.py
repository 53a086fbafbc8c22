from config.schema import ClientConfig

# Variável de ambiente que sobrepõe a URL base configurada
ENV_BASE_URL = "UNI_API_BASE_URL"


def default_client_config() -> ClientConfig:
    """Configuração padrão: API local na porta 8080, sem timeout,
    até 5 matérias do 1º ano vinculadas a cada novo aluno."""
    return ClientConfig(
        api_base_url="http://localhost:8080",
        timeout_seconds=None,
        auto_subject_year=1,
        auto_subject_count=5,
    )
