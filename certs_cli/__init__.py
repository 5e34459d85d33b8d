"""Report OpenShift certificates close to expiry from cert-expiry-report.json."""
