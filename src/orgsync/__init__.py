"""orgsync: desired-state reconciliation for departments, employees and projects."""
