import logging

import pytest

from ccrm.config import AppConfig
from ccrm.core.entities import CourseBuilder
from ccrm.main import CcrmPlatform
from ccrm.persistence import CourseDirectory, StudentDirectory
from ccrm.services import EnrollmentEngine, TranscriptCalculator


def make_course(code, credits=3, title=None, department="CS"):
    return CourseBuilder(code, title or f"Course {code}").credits(credits).department(department).build()


@pytest.fixture
def config(tmp_path):
    return AppConfig(data_directory=tmp_path / "app-data", backup_directory=tmp_path / "backups")


@pytest.fixture
def students():
    return StudentDirectory()


@pytest.fixture
def courses():
    return CourseDirectory()


@pytest.fixture
def engine():
    return EnrollmentEngine()


@pytest.fixture
def calculator():
    return TranscriptCalculator()


@pytest.fixture
def alice(students):
    return students.register("S001", "Alice Smith", "alice@example.com")


@pytest.fixture
def platform(config):
    platform = CcrmPlatform(config)
    platform.load_sample_data()
    return platform


@pytest.fixture(autouse=True)
def reset_ccrm_logger():
    yield
    logger = logging.getLogger("ccrm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
