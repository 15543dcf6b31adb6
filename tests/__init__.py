"""
outbox-execute tests

Unit tests for the bridge client, the find / wait / execute actions and the
command line entry point. No network access is needed; chain access is
replaced by fakes and mocks.
"""
