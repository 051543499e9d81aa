import unittest

from pydantic import ValidationError

from features.messenger.model.recipient import Recipient


class RecipientTest(unittest.TestCase):

    def test_id_dumped_as_string(self):
        recipient = Recipient(id = 1234567890123456)

        self.assertEqual(recipient.model_dump(mode = "json"), {"id": "1234567890123456"})

    def test_id_parsed_from_string(self):
        recipient = Recipient.model_validate({"id": "42"})

        self.assertEqual(recipient.id, 42)

    def test_non_numeric_id_rejected(self):
        with self.assertRaises(ValidationError):
            Recipient.model_validate({"id": "not-a-number"})

    def test_recipient_is_frozen(self):
        recipient = Recipient(id = 1)

        with self.assertRaises(ValidationError):
            recipient.id = 2

    def test_id_bounded_to_64_bits(self):
        self.assertEqual(Recipient(id = 9223372036854775807).id, 9223372036854775807)
        self.assertEqual(Recipient(id = -9223372036854775808).id, -9223372036854775808)
        with self.assertRaises(ValidationError):
            Recipient.model_validate({"id": "99999999999999999999999"})
        with self.assertRaises(ValidationError):
            Recipient(id = 9223372036854775808)
