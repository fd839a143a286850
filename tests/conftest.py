import pytest


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / 'root'
    (root / 'sub' / 'deep').mkdir(parents=True)
    (root / 'sub' / '.secret').mkdir()
    (root / 'a.txt').write_text('hello')
    (root / '.hidden').write_text('')
    (root / 'sub' / 'b.txt').write_text('')
    (root / 'sub' / 'deep' / 'c.txt').write_text('')
    (root / 'sub' / '.secret' / 'd.txt').write_text('')
    return root
