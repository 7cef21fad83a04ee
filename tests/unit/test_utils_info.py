"""
Unit tests for the reponame-info command.
"""

import reponame
from reponame.utils.info import check_names, get_reponame_info, get_system_info, main


class TestInfo:
    """Test cases for information gathering."""

    def test_get_system_info(self):
        """System info includes the Python version and platform."""
        info = get_system_info()
        assert 'python_version' in info
        assert 'platform' in info

    def test_get_reponame_info(self):
        """Package info reports version, layout and registry stats."""
        info = get_reponame_info()
        assert info['version'] == reponame.__version__
        assert info['sibling_repository_layout'] in (True, False)
        assert info['path_policy'] == 'sensitive'
        assert 'size' in info['registry']


class TestCheckNames:
    """Test cases for name checking."""

    def test_check_names(self):
        """Valid and invalid names are reported."""
        results = check_names(['@foo', '@', 'bad'])
        assert results[0]['valid'] and results[0]['canonical_form'] == '@foo'
        assert results[1]['valid'] and results[1]['canonical_form'] == ''
        assert not results[2]['valid']
        assert "must start with '@'" in results[2]['error']


class TestMain:
    """Test cases for the command-line entry point."""

    def test_main_without_names(self, capsys):
        """Without arguments, information is printed."""
        assert main([]) == 0
        assert 'Version:' in capsys.readouterr().out

    def test_main_valid_names(self, capsys):
        """All-valid names exit with 0."""
        assert main(['@foo', '@bar']) == 0
        out = capsys.readouterr().out
        assert "'@foo'" in out and "'@bar'" in out

    def test_main_invalid_name(self, capsys):
        """Any invalid name exits with 1."""
        assert main(['@foo', '@..']) == 1
        assert 'INVALID' in capsys.readouterr().out
