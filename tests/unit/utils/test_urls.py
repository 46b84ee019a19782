"""Tests for the URL utilities module."""

from jira_issue_cli.utils.urls import build_browse_url, is_atlassian_cloud_url


def test_is_atlassian_cloud_url_none():
    """Test that is_atlassian_cloud_url returns False for None."""
    assert is_atlassian_cloud_url(None) is False


def test_is_atlassian_cloud_url_cloud():
    """Test that is_atlassian_cloud_url returns True for Atlassian Cloud URLs."""
    assert is_atlassian_cloud_url("https://example.atlassian.net") is True
    assert is_atlassian_cloud_url("https://company.jira.com") is True
    assert is_atlassian_cloud_url("https://team.jira-dev.com") is True


def test_is_atlassian_cloud_url_server():
    """Test that is_atlassian_cloud_url returns False for Server/DC URLs."""
    assert is_atlassian_cloud_url("https://jira.example.com") is False
    assert is_atlassian_cloud_url("https://jira.company.internal") is False


def test_is_atlassian_cloud_url_private_hosts():
    """Localhost and private addresses are always Server/Data Center."""
    assert is_atlassian_cloud_url("http://localhost:8080") is False
    assert is_atlassian_cloud_url("http://127.0.0.1:8080") is False
    assert is_atlassian_cloud_url("http://192.168.1.100") is False
    assert is_atlassian_cloud_url("http://10.0.0.1") is False
    assert is_atlassian_cloud_url("http://172.16.0.1") is False


def test_build_browse_url():
    assert (
        build_browse_url("https", "jira.example.com", "WEB-7")
        == "https://jira.example.com/browse/WEB-7"
    )
    assert (
        build_browse_url("http", "localhost:8080", "PROJ-1")
        == "http://localhost:8080/browse/PROJ-1"
    )
