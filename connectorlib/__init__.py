"""Register connector workloads (Service + Deployment) in a Kubernetes namespace."""
