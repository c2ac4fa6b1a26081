"""Local TPC-H dataset provisioning for test environments."""
