import logging

from core.infra.logging_filters import SanitizePIIFilter


def _record(msg, args=None):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


def test_masks_email_in_message():
    record = _record("Creando miembro del personal: ana@example.com")
    assert SanitizePIIFilter().filter(record) is True
    assert "ana@example.com" not in record.getMessage()
    assert "***EMAIL***" in record.getMessage()


def test_masks_email_and_phone_in_tuple_args():
    record = _record("staff %s tel %s id %s", ("ana@example.com", "+573001234567", 7))
    SanitizePIIFilter().filter(record)
    message = record.getMessage()
    assert "***EMAIL***" in message
    assert "***PHONE***" in message
    assert message.endswith("id 7")


def test_masks_dict_args():
    record = _record("email %(email)s", ({"email": "ana@example.com"},))
    SanitizePIIFilter().filter(record)
    assert record.getMessage() == "email ***EMAIL***"


def test_leaves_plain_messages_untouched():
    record = _record("Producto creado con ID: %s", (42,))
    SanitizePIIFilter().filter(record)
    assert record.getMessage() == "Producto creado con ID: 42"
