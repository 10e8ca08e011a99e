from core.selector import select
from core.sniffer import SniffVerdict, is_text_document, sniff, sniff_path


def test_pdf_header(text_pdf_bytes):
    v = sniff(text_pdf_bytes)
    assert v == SniffVerdict(looks_like_document=True, has_early_text=True)
    assert is_text_document(v)


def test_signature_must_be_in_header():
    v = sniff(b"\x00" * 10 + b"%PDF-1.4 hello")
    assert not v.looks_like_document
    assert v.has_early_text
    assert not is_text_document(v)


def test_no_letters_in_prefix():
    assert sniff(b"\x00" * 2000) == SniffVerdict(False, False)
    # Una letra fuera de los primeros 1000 bytes no cuenta
    assert not sniff(b"1" * 1000 + b"abc").has_early_text


def test_png_is_not_a_document():
    v = sniff(b"\x89PNG\r\n\x1a\n" + b"\x00" * 100)
    assert not v.looks_like_document


def test_unreadable_path(tmp_path):
    assert sniff_path(tmp_path / "missing.pdf") == SniffVerdict(False, False)


def test_sniff_path_reads_prefix(tmp_path, text_pdf_bytes):
    p = tmp_path / "doc.pdf"
    p.write_bytes(text_pdf_bytes)
    assert is_text_document(sniff_path(p))


def test_sniff_does_not_change_selection(text_pdf_bytes):
    before = select(text_pdf_bytes)
    sniff(text_pdf_bytes)
    assert select(text_pdf_bytes) == before
