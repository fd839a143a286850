import pytest

from fslister.cli import build_parser, main


def test_flags_combine(tree, capsys):
    assert main(['-la', str(tree)]) == 0
    names = sorted(line.split('\t')[-1] for line in capsys.readouterr().out.splitlines())
    assert names == ['.', '..', '.hidden', 'a.txt', 'sub']


def test_h_means_human_readable():
    args = build_parser().parse_args(['-lh'])
    assert args.human_readable
    assert args.show_details
    assert args.directory == '.'


def test_default_directory(tree, capsys, monkeypatch):
    monkeypatch.chdir(tree)
    assert main([]) == 0
    assert sorted(capsys.readouterr().out.splitlines()) == ['a.txt', 'sub']


def test_recursive_flag(tree, capsys):
    assert main(['-R', str(tree)]) == 0
    assert f'{tree}/sub/deep:' in capsys.readouterr().out.splitlines()


def test_unknown_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['-x'])
    assert exc.value.code != 0
    err = capsys.readouterr().err
    assert 'usage: fslister [-l] [-R] [-a] [-i] [-h] [directory]' in err


def test_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / 'missing')]) == 1
    assert 'Failed to open directory' in capsys.readouterr().err


def test_config_defaults(tree, tmp_path, capsys):
    config = tmp_path / 'fslister.yaml'
    config.write_text('show_hidden: true\n')
    assert main(['--config', str(config), str(tree)]) == 0
    assert '.hidden' in capsys.readouterr().out.splitlines()


def test_invalid_config(tree, tmp_path, capsys):
    config = tmp_path / 'fslister.yaml'
    config.write_text('colour: true\n')
    assert main(['--config', str(config), str(tree)]) == 1
    assert 'Invalid configuration' in capsys.readouterr().err


def test_missing_config(tree, tmp_path, capsys):
    assert main(['--config', str(tmp_path / 'none.yaml'), str(tree)]) == 1
    assert 'Invalid configuration' in capsys.readouterr().err


def test_log_level_case_insensitive():
    args = build_parser().parse_args(['--log-level', 'debug'])
    assert args.log_level == 'DEBUG'


def test_quoted_false_config_fails(tree, tmp_path, capsys):
    config = tmp_path / 'fslister.yaml'
    config.write_text('show_hidden: "false"\n')
    assert main(['--config', str(config), str(tree)]) == 1
    assert 'show_hidden' in capsys.readouterr().err
