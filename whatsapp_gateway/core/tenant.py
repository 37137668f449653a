"""Immutable per-deployment tenant configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

HUMAN_TRANSFER_FLAG = "[TRANSFERIR_HUMANO]"

SYSTEM_PROMPT_TEMPLATE = """Você é a {ai_name}, {ai_role} da {ai_organization}.

Suas responsabilidades:
1. Atender {entity_name_plural} com cordialidade e eficiência
2. Responder dúvidas sobre:
{help_topics}
3. Coletar informações quando necessário (nome, matrícula, secretaria)
4. Encaminhar demandas complexas para atendimento humano

Regras:
- Seja sempre educado e profissional
- Responda em português brasileiro
- Se não souber a resposta, informe que vai encaminhar para um atendente humano
- Nunca invente informações sobre prazos ou valores
- Pergunte a matrícula do servidor para personalizar o atendimento

Quando identificar uma demanda complexa que precisa de atendimento humano, \
responda com a flag {flag} no início da mensagem."""


@dataclass(frozen=True)
class TemplateCategory:
    value: str
    label: str


@dataclass(frozen=True)
class TenantConfig:
    """Read-only tenant defaults set on ``app.state`` at startup."""

    id: str
    ai_name: str
    ai_role: str
    ai_organization: str
    entity_name_plural: str
    help_topics: tuple[str, ...]
    template_categories: tuple[TemplateCategory, ...]
    static_sample_variables: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def system_prompt(self) -> str:
        topics = "\n".join(f"   - {topic}" for topic in self.help_topics)
        return SYSTEM_PROMPT_TEMPLATE.format(
            ai_name=self.ai_name,
            ai_role=self.ai_role,
            ai_organization=self.ai_organization,
            entity_name_plural=self.entity_name_plural,
            help_topics=topics,
            flag=HUMAN_TRANSFER_FLAG,
        )

    def sample_variables(self, now: datetime | None = None) -> dict[str, str]:
        """Sample values for template previews; date and time use pt-BR format."""
        now = now or datetime.now()
        samples = dict(self.static_sample_variables)
        samples["data"] = now.strftime("%d/%m/%Y")
        samples["hora"] = now.strftime("%H:%M")
        return samples


DEFAULT_TENANT = TenantConfig(
    id="prefeitura-municipal",
    ai_name="FloxBee",
    ai_role="assistente virtual",
    ai_organization="Secretaria de Administração Municipal",
    entity_name_plural="servidores públicos",
    help_topics=(
        "Segunda via de contracheque e documentos",
        "Férias, licenças e afastamentos",
        "Progressão de carreira",
        "Benefícios e auxílios",
        "Prazos e procedimentos administrativos",
    ),
    template_categories=(
        TemplateCategory("atendimento", "Atendimento"),
        TemplateCategory("campanha", "Campanha"),
        TemplateCategory("notificacao", "Notificação"),
        TemplateCategory("lembrete", "Lembrete"),
        TemplateCategory("boas-vindas", "Boas-vindas"),
        TemplateCategory("outro", "Outro"),
    ),
    static_sample_variables=MappingProxyType(
        {
            "nome": "João Silva",
            "matricula": "12345",
            "cargo": "Analista",
            "secretaria": "Secretaria de Administração",
            "email": "joao@email.com",
            "whatsapp": "(11) 99999-9999",
        }
    ),
)
