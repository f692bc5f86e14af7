"""
Main entry point for the CCRM platform.
"""

import logging
import threading
from typing import Optional

from .cli import CcrmCli
from .config import AppConfig, configure_logging
from .core.entities import CourseBuilder
from .core.enums import Grade
from .core.exceptions import CcrmException
from .persistence import (
    BackupManager, CourseDirectory, CourseImporter, DataExporter, StudentDirectory
)
from .services import EnrollmentEngine, TranscriptCalculator

logger = logging.getLogger(__name__)


class CcrmPlatform:
    """Composition root: owns the configuration and wires every component."""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self.students = StudentDirectory()
        self.courses = CourseDirectory()
        self.engine = EnrollmentEngine(max_credits=self.config.max_credits_per_semester)
        self.transcripts = TranscriptCalculator()
        self.importer = CourseImporter(self.courses)
        self.exporter = DataExporter(self.config, self.students, self.courses)
        self.backups = BackupManager(self.config)
        self._rest_api = None
        self._rest_thread = None

    @property
    def rest_api(self):
        """The FastAPI wrapper, created on first use."""
        if self._rest_api is None:
            from .api import CcrmRestAPI
            self._rest_api = CcrmRestAPI(self.students, self.courses, self.engine, self.transcripts)
        return self._rest_api

    def load_sample_data(self) -> None:
        logger.info("Loading sample data...")
        self.students.register("S001", "Alice Smith", "alice@example.com")
        self.students.register("S002", "Bob Johnson", "bob@example.com")
        self.courses.add(CourseBuilder("CS101", "Intro to Programming").credits(4).department("CS").build())
        self.courses.add(CourseBuilder("MA201", "Calculus I").credits(4).department("Math").build())
        self.courses.add(CourseBuilder("EN101", "English Composition").credits(3).department("English").build())
        logger.info("Sample data loaded.")

    def start_rest_server(self, host: str = "127.0.0.1", port: int = 8000, background: bool = False):
        """Serve the REST API with uvicorn."""
        import uvicorn

        def run_server():
            uvicorn.run(
                self.rest_api.app,
                host=host,
                port=port,
                log_level=self.config.log_level.lower()
            )

        logger.info("REST server starting on %s:%d", host, port)
        if not background:
            run_server()
            return
        self._rest_thread = threading.Thread(target=run_server, daemon=True)
        self._rest_thread.start()

    def run_demo(self) -> None:
        """Walk through enrollment, grading and transcripts on the sample data."""
        alice = self.students.find_by_reg_no("S001")
        cs101 = self.courses.find_by_code("CS101")
        ma201 = self.courses.find_by_code("MA201")
        en101 = self.courses.find_by_code("EN101")
        if None in (alice, cs101, ma201, en101):
            print("Demo needs the sample data; run without --no-sample-data.")
            return

        print("\n=== Enrollment Demo ===")
        for course in (cs101, ma201, en101, cs101):
            try:
                self.engine.enroll(alice, course)
                print(f"Enrolled {alice.full_name} in {course.code}")
            except CcrmException as e:
                print(f"Enrollment Failed: {e.message}")

        self.engine.assign_grade(alice, cs101, Grade.A)
        self.engine.assign_grade(alice, ma201, Grade.B)
        print(self.transcripts.render(alice))
        print(f"Statistics: {self.engine.get_statistics(self.students.all())}")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Campus Course & Records Manager")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--serve", action="store_true", help="Serve the REST API instead of the menu")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="REST server host")
    parser.add_argument("--port", type=int, default=8000, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--import", dest="import_file", type=str, help="Import courses from a CSV file first")
    parser.add_argument("--no-sample-data", action="store_true", help="Start with empty directories")

    args = parser.parse_args(argv)

    try:
        config = AppConfig.from_file(args.config) if args.config else AppConfig()
        configure_logging(config.log_level)
        config.ensure_directories()
    except CcrmException as e:
        parser.error(e.message)

    platform = CcrmPlatform(config)
    if not args.no_sample_data:
        platform.load_sample_data()

    if args.import_file:
        try:
            report = platform.importer.import_file(args.import_file)
            print(f"Imported {report.added_count} courses, skipped {report.skipped_count} lines")
        except CcrmException as e:
            print(f"Error: {e.message}")

    try:
        if args.demo:
            platform.run_demo()
        elif args.serve:
            platform.start_rest_server(args.host, args.port)
        else:
            CcrmCli(platform).run()
    except KeyboardInterrupt:
        print("\nShutting down...")
    return 0


if __name__ == "__main__":
    main()
