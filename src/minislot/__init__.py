"""minislot: render Katana dev-node manifests and submit them to Kubernetes."""

__version__ = "0.1.0"
