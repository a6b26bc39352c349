"""Process exit codes for the cloudstore CLI."""

OK = 0
# botocore refused the derived client config.
ERROR = 1
INVALID_CONFIG = 2
