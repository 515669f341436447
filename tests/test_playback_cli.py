from __future__ import annotations

from tools.playback import main


def test_info_prints_synchronized_lengths(recording_factory, capsys):
    first = recording_factory("catheter003.txt", 4)
    second = recording_factory("catheter005.txt", 6)

    assert main(["--info", str(first), str(second)]) == 0

    out = capsys.readouterr().out
    assert "Common length: 6 frames" in out
    assert "4 -> 6 samples" in out


def test_info_without_warp_keeps_native_lengths(recording_factory, capsys):
    first = recording_factory("a.txt", 4)
    second = recording_factory("b.txt", 6)

    assert main(["--info", "--no-warp", str(first), str(second)]) == 0

    out = capsys.readouterr().out
    assert "4 -> 4 samples" in out


def test_missing_recordings_are_reported(tmp_path, capsys):
    assert main([]) == 1
    assert main([str(tmp_path / "missing.txt")]) == 1

    out = capsys.readouterr().out
    assert "Recording not found" in out


def test_malformed_recording_is_reported(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("Frame\tTime\n0\t0.0\t1.0\n", encoding="utf-8")

    assert main(["--info", str(path)]) == 1
    assert "[Replay] Error:" in capsys.readouterr().out
