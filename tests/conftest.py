import pytest

PHRASE = "Hello World, this report covers quarter results"


@pytest.fixture
def phrase() -> str:
    return PHRASE


@pytest.fixture
def text_pdf_bytes() -> bytes:
    """PDF mínimo con un bloque BT/ET sin comprimir y basura binaria al final."""
    return (
        b"%PDF-1.4\n"
        b"1 0 obj\n<< /Length 80 >>\nstream\n"
        b"BT /F1 12 Tf (" + PHRASE.encode("ascii") + b") Tj ET\n"
        b"endstream\nendobj\n" + bytes(range(128, 256)) * 2
    )
