"""Ship computer core: the shared instance and request dispatch."""
