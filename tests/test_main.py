# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import sys

import pytest

from largeint import RSAPrivKey
from largeint import RSAPubKey
from largeint import modular_exp
import largeint.__main__ as cli


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["largeint", *map(str, argv)])
    cli.main()


@pytest.fixture
def keyfiles(tmp_path, textbook_key):
    (e, n), (d, _) = textbook_key
    pub, priv = tmp_path / "pubkey.rsa", tmp_path / "privkey.rsa"
    RSAPubKey(e, n).export(pub)
    RSAPrivKey(d, n).export(priv)
    return pub, priv


@pytest.fixture
def target(tmp_path):
    path = tmp_path / "report.txt"
    path.write_text("Quarterly numbers.", encoding="utf-8")
    return path


def test_keygen(monkeypatch, tmp_path, li):
    pub, priv = tmp_path / "pub.rsa", tmp_path / "priv.rsa"
    run(monkeypatch, "-n", "keygen", "--bits", 16, "-p", pub, "-P", priv)
    rpub = RSAPubKey.import_key(pub)
    rpriv = RSAPrivKey.import_key(priv)
    assert rpub.mod == rpriv.mod
    message = li(4242)
    assert modular_exp(modular_exp(message, rpub.expo, rpub.mod), rpriv.expo, rpriv.mod) == message


def test_keygen_refuses_overwrite(monkeypatch, capsys, keyfiles):
    pub, priv = keyfiles
    before = pub.read_bytes(), priv.read_bytes()
    run(monkeypatch, "-n", "keygen", "--bits", 16, "-p", pub, "-P", priv)
    assert "already exists" in capsys.readouterr().out
    assert (pub.read_bytes(), priv.read_bytes()) == before


def test_keygen_overwrite(monkeypatch, keyfiles):
    pub, priv = keyfiles
    before = pub.read_bytes()
    run(monkeypatch, "-n", "keygen", "--bits", 16, "-p", pub, "-P", priv, "-o")
    assert pub.read_bytes() != before


@pytest.mark.parametrize("sign_mode,verify_mode", [("s", "v"), ("sign", "verify")])
def test_sign_then_verify(mocker, monkeypatch, capsys, keyfiles, target, li, sign_mode, verify_mode):
    pub, priv = keyfiles
    mocker.patch("largeint.rsa.hash_file", return_value=li(65))
    run(monkeypatch, "-n", sign_mode, target, "-P", priv)
    assert target.with_name("report.txt.sig").exists()
    run(monkeypatch, "-n", verify_mode, target, "-p", pub)
    assert capsys.readouterr().out.strip() == "Signature is valid."


def test_verify_mismatch_exits(mocker, monkeypatch, capsys, keyfiles, target, li):
    pub, priv = keyfiles
    hashed = mocker.patch("largeint.rsa.hash_file", return_value=li(65))
    run(monkeypatch, "-n", "s", target, "-P", priv)
    hashed.return_value = li(66)
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "-n", "v", target, "-p", pub)
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Signature is NOT valid!" in out
    assert "Signature is valid." not in out


def test_verify_missing_key(monkeypatch, capsys, tmp_path, target):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "-n", "v", target, "-p", tmp_path / "missing.rsa")
    assert exc.value.code == 2
    assert "Error" in capsys.readouterr().err


def test_non_interactive_missing_file(monkeypatch, keyfiles):
    pub, _ = keyfiles
    with pytest.raises(IOError):
        run(monkeypatch, "-n", "v", "-p", pub)


def test_interactive_prompts_for_file(mocker, monkeypatch, capsys, keyfiles, target, li):
    pub, priv = keyfiles
    mocker.patch("largeint.rsa.hash_file", return_value=li(65))
    run(monkeypatch, "-n", "s", target, "-P", priv)
    prompt = mocker.patch("builtins.input", side_effect=["", str(target)])
    run(monkeypatch, "v", "-p", pub)
    assert prompt.call_count == 2
    out = capsys.readouterr().out
    assert "Please provide a value." in out
    assert "Signature is valid." in out


def test_interactive_subcommand_choice(mocker, monkeypatch, capsys, keyfiles, target, li):
    pub, priv = keyfiles
    mocker.patch("largeint.rsa.hash_file", return_value=li(65))
    run(monkeypatch, "-n", "s", target, "-P", priv)
    mocker.patch("builtins.input", side_effect=["nonsense", "verify", str(pub), str(target)])
    run(monkeypatch)
    out = capsys.readouterr().out
    assert "Please select an option from the list." in out
    assert "Signature is valid." in out


@pytest.mark.parametrize("extra", [("--bits", 2), ("--bits", 16, "--seed", 4)])
def test_keygen_bad_parameters_exit(monkeypatch, capsys, tmp_path, extra):
    pub, priv = tmp_path / "pub.rsa", tmp_path / "priv.rsa"
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "-n", "keygen", "-p", pub, "-P", priv, *extra)
    assert exc.value.code == 2
    assert capsys.readouterr().err.startswith("Error: ")
    assert not pub.exists()
    assert not priv.exists()


def test_sign_digest_too_large_exits(monkeypatch, capsys, keyfiles, target):
    _, priv = keyfiles
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "-n", "s", target, "-P", priv, "--sha", "sha512")
    assert exc.value.code == 2
    assert "Hash function too large for current key." in capsys.readouterr().err
    assert not target.with_name("report.txt.sig").exists()


def test_preset_defaults():
    assert cli.preset("sha", (False, False)) == "sha256"
    assert cli.preset("sha", (False, True)) is None
    assert cli.preset("bits", (True, False)) == 256
    assert cli.preset("bits", (False, False)) is None
    with pytest.raises(IOError):
        cli.preset("file", (True, False))


def test_ask_retries_until_converted(mocker, capsys):
    prompt = mocker.patch("builtins.input", side_effect=["many", "64"])
    assert cli.ask("bits", (False, False)) == 64
    assert prompt.call_count == 2
    out = capsys.readouterr().out
    assert "We could not convert your value to int." in out
    assert "Default value: 256" in out


def test_ask_accepts_default_choice(mocker, capsys):
    mocker.patch("builtins.input", side_effect=["md5", ""])
    assert cli.ask("sha", (False, True)) == "sha256"
    out = capsys.readouterr().out
    assert "sha256 (Default)" in out
    assert "Please select an option from the list." in out
