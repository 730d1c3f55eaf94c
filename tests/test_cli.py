from interface.cli import main
from writers import generate_sample_csv


def test_gst_inter_state(capsys):
    assert main(["gst", "1000", "--rate", "18", "--from", "27", "--to", "29"]) == 0
    out = capsys.readouterr().out

    assert "IGST (18%): 180.00" in out
    assert "Total amount: 1180.00" in out
    assert "CGST" not in out


def test_gst_intra_state_with_cess(capsys):
    assert main(["gst", "1000", "--rate", "28", "--cess", "12", "--from", "MH", "--to", "Maharashtra"]) == 0
    out = capsys.readouterr().out

    assert "CGST (14%): 140.00" in out
    assert "SGST (14%): 140.00" in out
    assert "Cess (12%): 120.00" in out
    assert "Total amount: 1400.00" in out


def test_gst_forced_igst_and_inclusive(capsys):
    assert main(["gst", "1180", "--igst", "--inclusive"]) == 0
    out = capsys.readouterr().out

    assert "Taxable amount: 1000.00" in out
    assert "IGST (18%): 180.00" in out


def test_gst_invalid_rate(capsys):
    assert main(["gst", "1000", "--rate", "120"]) == 1
    assert "between 0 and 100" in capsys.readouterr().err


def test_sample_prints_csv(capsys):
    assert main(["sample", "--type", "suppliers"]) == 0
    assert capsys.readouterr().out.strip() == generate_sample_csv("suppliers")


def test_import_with_xlsx_output(tmp_path, capsys):
    source = tmp_path / "tally.csv"
    source.write_text(generate_sample_csv("tally"), encoding="utf-8")
    out = tmp_path / "out" / "result.xlsx"

    assert main(["import", str(source), "--type", "tally", "--xlsx", str(out)]) == 0
    printed = capsys.readouterr().out

    assert "Reading tally.csv as CSV" in printed
    assert "processed: 3" in printed
    assert "skipped: 0" in printed
    assert out.exists()


def test_import_missing_file(tmp_path, capsys):
    assert main(["import", str(tmp_path / "nope.csv")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_import_without_records_fails(tmp_path):
    source = tmp_path / "empty.csv"
    source.write_text("Foo,Bar\n1,2\n", encoding="utf-8")
    assert main(["import", str(source)]) == 1
