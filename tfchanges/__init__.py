"""tfchanges: report Terraform resource changes between git revisions."""

__version__ = "0.3.0"
