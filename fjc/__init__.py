"""fast-jira-commit: build git commit messages from Jira tickets."""
