import pandas as pd

from core.csv_writer import CSV_COLUMNS, write_csv
from core.intake import read_file_content


def test_summary_csv(tmp_path, text_pdf_bytes):
    doc = tmp_path / "q.pdf"
    doc.write_bytes(text_pdf_bytes)
    note = tmp_path / "n.txt"
    note.write_text("hola")

    contents = [read_file_content(doc, with_sniff=True), read_file_content(note)]
    out = write_csv(contents, tmp_path / "out" / "summary.csv")

    df = pd.read_csv(out)
    assert list(df.columns) == CSV_COLUMNS
    assert list(df["archivo"]) == ["q.pdf", "n.txt"]
    assert list(df["estado"]) == ["text_found", "text_found"]
    assert list(df["ruta"]) == ["document", "plain_text"]
