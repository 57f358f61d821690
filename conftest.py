# mypy: allow-untyped-defs
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "settings")

from emr_scribe.libraries.memory_log import MemoryLog, ENTRIES

OPTION_PRINT_LOGS = "--print-logs"


def pytest_addoption(parser):
    parser.addoption(
        OPTION_PRINT_LOGS,
        action="store_true",
        default=False,
        help="Print the logs of the generation requests at the end of the tests",
    )


def pytest_unconfigure(config):
    if config.getoption(OPTION_PRINT_LOGS, default=False):
        request_uuid_list = list(ENTRIES.keys())
        for request_uuid in request_uuid_list:
            print(MemoryLog.end_session(request_uuid))
