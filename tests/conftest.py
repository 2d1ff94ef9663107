import pytest

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Points HOME at an empty directory and clears gitjump's environment variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    # setenv first so that values loaded by python-dotenv are undone on teardown
    for name in ("GITJUMP_ROOT", "GITJUMP_CACHE_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(home)
    return home

@pytest.fixture
def scan_root(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    return root

@pytest.fixture
def make_repo(scan_root):
    """Creates `<scan_root>/<parts...>/.git` and returns the repository path."""
    def _make(*parts):
        repo_path = scan_root.joinpath(*parts)
        (repo_path / ".git").mkdir(parents=True)
        return repo_path
    return _make
