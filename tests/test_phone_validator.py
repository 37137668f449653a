"""Unit tests for Brazilian number formatting and validation."""

from __future__ import annotations

import unittest

from tests.stubs import StubMessagingProvider
from whatsapp_gateway.models.phone import summarize_validation
from whatsapp_gateway.services.phone_validator import (
    PhoneValidationService,
    format_brazilian_number,
    validate_number,
)


class FormatBrazilianNumberTestCase(unittest.TestCase):
    def test_strips_punctuation_and_adds_country_code(self) -> None:
        self.assertEqual(format_brazilian_number("(11) 99999-0001"), "5511999990001")

    def test_strips_leading_zeros(self) -> None:
        self.assertEqual(format_brazilian_number("011 99999-0001"), "5511999990001")

    def test_keeps_existing_country_code(self) -> None:
        self.assertEqual(format_brazilian_number("+55 21 98888-7777"), "5521988887777")

    def test_inserts_ninth_digit_for_old_mobile_format(self) -> None:
        self.assertEqual(format_brazilian_number("55 11 8888-7777"), "5511988887777")

    def test_landline_keeps_eight_digits(self) -> None:
        self.assertEqual(format_brazilian_number("(11) 3333-4444"), "551133334444")


class ValidateNumberTestCase(unittest.TestCase):
    def test_valid_mobile(self) -> None:
        self.assertIsNone(validate_number("5511999990001"))

    def test_too_short(self) -> None:
        self.assertEqual(validate_number("551199"), "Número muito curto")

    def test_too_long(self) -> None:
        self.assertEqual(validate_number("5511999990001234"), "Número muito longo")

    def test_invalid_area_code(self) -> None:
        self.assertEqual(validate_number("5505999990001"), "DDD inválido")

    def test_invalid_local_number_length(self) -> None:
        self.assertEqual(validate_number("55119999900012"), "Número local inválido")

    def test_foreign_number_only_checks_length(self) -> None:
        self.assertIsNone(validate_number("14155550123"))


class PhoneValidationServiceTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_without_provider_existence_is_unverified(self) -> None:
        results = await PhoneValidationService().validate_numbers(["(11) 99999-0001", "123"])

        self.assertEqual([result.formatted for result in results], ["5511999990001", "55123"])
        self.assertEqual([result.valid for result in results], [True, False])
        self.assertEqual([result.exists for result in results], [None, None])
        self.assertEqual(results[1].error, "Número muito curto")
        self.assertEqual(
            summarize_validation(results),
            {"total": 2, "valid": 1, "invalid": 1, "verified": 0, "notOnWhatsApp": 0, "unverified": 2},
        )

    async def test_existence_checked_only_for_valid_numbers(self) -> None:
        provider = StubMessagingProvider(existing_numbers={"5511999990001"})
        service = PhoneValidationService(messaging_provider=provider)

        results = await service.validate_numbers(["11999990001", "11988887777", "99"])

        self.assertEqual(provider.contact_checks, ["5511999990001", "5511988887777"])
        self.assertEqual([result.exists for result in results], [True, False, None])
        self.assertEqual(
            summarize_validation(results),
            {"total": 3, "valid": 2, "invalid": 1, "verified": 1, "notOnWhatsApp": 1, "unverified": 1},
        )
        self.assertEqual(
            results[0].to_dict(),
            {"number": "11999990001", "formatted": "5511999990001", "valid": True, "exists": True},
        )


if __name__ == "__main__":
    unittest.main()
