"""Entry point: python -m jira_issue_cli"""

from jira_issue_cli import main

if __name__ == "__main__":
    main()
