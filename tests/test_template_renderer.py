"""Unit tests for template variable handling and tenant samples."""

from __future__ import annotations

import unittest
from datetime import datetime

from whatsapp_gateway.core.tenant import DEFAULT_TENANT
from whatsapp_gateway.services.template_renderer import extract_variables, preview_template, render_template


class TemplateRendererTestCase(unittest.TestCase):
    def test_extract_variables_unique_in_order(self) -> None:
        content = "Olá {{nome}}! Matrícula {{matricula}}. Até logo, {{nome}}. {{ nome }}"

        self.assertEqual(extract_variables(content), ["nome", "matricula"])

    def test_render_fills_and_blanks_unknown(self) -> None:
        rendered = render_template(
            "Olá {{nome}}, secretaria {{secretaria}}, cargo {{cargo}}.",
            {"nome": "Maria", "secretaria": None},
        )

        self.assertEqual(rendered, "Olá Maria, secretaria , cargo .")

    def test_render_falls_back_to_lowercase_key(self) -> None:
        self.assertEqual(render_template("Olá {{Nome}}", {"nome": "Maria"}), "Olá Maria")

    def test_preview_keeps_unknown_placeholders(self) -> None:
        preview = preview_template("Olá {{nome}}, protocolo {{protocolo}}", {"nome": "João Silva"})

        self.assertEqual(preview, "Olá João Silva, protocolo {{protocolo}}")


class TenantConfigTestCase(unittest.TestCase):
    def test_sample_variables_include_current_date_and_time(self) -> None:
        samples = DEFAULT_TENANT.sample_variables(now=datetime(2026, 3, 5, 9, 7))

        self.assertEqual(samples["data"], "05/03/2026")
        self.assertEqual(samples["hora"], "09:07")
        self.assertEqual(samples["nome"], "João Silva")

    def test_sample_variables_are_copies(self) -> None:
        samples = DEFAULT_TENANT.sample_variables()
        samples["nome"] = "Outro"

        self.assertEqual(DEFAULT_TENANT.sample_variables()["nome"], "João Silva")
        with self.assertRaises(TypeError):
            DEFAULT_TENANT.static_sample_variables["nome"] = "Outro"  # type: ignore[index]

    def test_system_prompt_lists_help_topics(self) -> None:
        prompt = DEFAULT_TENANT.system_prompt()

        self.assertIn("Você é a FloxBee, assistente virtual da Secretaria de Administração Municipal.", prompt)
        self.assertIn("   - Férias, licenças e afastamentos", prompt)
        self.assertIn("[TRANSFERIR_HUMANO]", prompt)


if __name__ == "__main__":
    unittest.main()
