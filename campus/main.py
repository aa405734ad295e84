"""
Main entry point for the campus platform.
"""

import json
import threading
import time
from typing import Any, Dict, List, Optional

from .core.decorators import TutoringSupportDecorator
from .core.exceptions import ConfigurationError
from .core.factories import BasicStudentFactory
from .core.interfaces import StudentFactory
from .core.university import University
from .api.rest_api import CampusRestAPI


DEFAULT_CONFIG: Dict[str, Any] = {
    'rest_host': "0.0.0.0",
    'rest_port': 8000,
    'demo_course': "Advanced Quantum Mechanics",
}


def load_config(path: str) -> Dict[str, Any]:
    """Load a JSON configuration file."""
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load configuration from {path}: {str(e)}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration in {path} must be a JSON object")
    return config


class CampusPlatform:
    """Main platform class that wires the registry, factory and REST API."""

    def __init__(self, config: Optional[dict] = None, university: Optional[University] = None,
                 student_factory: Optional[StudentFactory] = None):
        self._config = {**DEFAULT_CONFIG, **(config or {})}
        self._university = university if university is not None else University.get_instance()
        self._student_factory = student_factory or BasicStudentFactory()
        self._rest_api = None
        self._rest_thread = None
        self._running = False

        # Initialize platform
        self._initialize_platform()

    def _initialize_platform(self):
        """Initialize the platform with all services."""
        print("Initializing campus platform...")

        self._rest_api = CampusRestAPI(self._university, self._student_factory)
        print("✓ REST API initialized")

        print("✓ Campus platform initialized successfully!")

    @property
    def config(self) -> Dict[str, Any]:
        return self._config.copy()

    @property
    def university(self) -> University:
        return self._university

    @property
    def student_factory(self) -> StudentFactory:
        return self._student_factory

    @property
    def rest_app(self):
        return self._rest_api.app

    def _resolve_address(self, host: Optional[str], port: Optional[int]):
        """Fill unset host/port from configuration; port 0 is kept as given."""
        if host is None:
            host = self._config['rest_host']
        if port is None:
            port = self._config['rest_port']
        return host, port

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Start the REST server."""
        if self._rest_thread is not None:
            print("REST server already running")
            return

        import uvicorn

        host, port = self._resolve_address(host, port)

        def run_server():
            uvicorn.run(
                self._rest_api.app,
                host=host,
                port=port,
                log_level="info"
            )

        # Start server in a separate thread
        self._rest_thread = threading.Thread(target=run_server, daemon=True)
        self._rest_thread.start()

        print(f"✓ REST server started on {host}:{port}")

    def start_platform(self, host: Optional[str] = None, port: Optional[int] = None):
        """Start the entire platform."""
        if self._running:
            print("Platform already running")
            return

        print("Starting campus platform...")
        self.start_rest_server(host, port)

        self._running = True
        _, port = self._resolve_address(host, port)
        print("✓ Campus platform started successfully!")
        print(f"  - REST API: http://localhost:{port}")
        print(f"  - API Docs: http://localhost:{port}/docs")

    def stop_platform(self):
        """Stop the platform."""
        if not self._running:
            print("Platform not running")
            return

        print("Stopping campus platform...")
        # The uvicorn thread is a daemon and exits with the process
        self._rest_thread = None
        self._running = False
        print("✓ Campus platform stopped")

    def run_demo(self) -> bool:
        """Run the factory, decorator and singleton walkthrough."""
        course = self._config['demo_course']

        print("Factory Pattern: Created a BasicStudent using BasicStudentFactory.")
        student = self._student_factory.create_student(["Math", "Physics"], True)

        print("Decorator Pattern: Enhancing BasicStudent with TutoringSupportDecorator.")
        tutored_student = TutoringSupportDecorator(student)

        print("Singleton Pattern: Adding student to the University (Singleton).")
        self._university.add_student(tutored_student)

        print(f"University now has {len(self._university.get_students())} students.")

        can_take = tutored_student.can_take_course(course)
        print(f"Checking enhanced capabilities due to Decorator: "
              f"Can tutored student take '{course}'? {str(can_take).lower()}")
        return can_take


def main(argv: Optional[List[str]] = None):
    """
    Main entry point.

    Runs the fixed walkthrough by default; ``--serve`` starts the REST API
    instead.
    """
    import argparse

    parser = argparse.ArgumentParser(description="Campus Student Registry Platform")
    parser.add_argument("--serve", action="store_true", help="Start the REST server instead of the walkthrough")
    parser.add_argument("--rest-host", type=str, help="REST server host")
    parser.add_argument("--rest-port", type=int, help="REST server port")
    parser.add_argument("--config", type=str, help="Configuration file path")

    args = parser.parse_args(argv)

    # Load configuration
    config = {}
    if args.config:
        config = load_config(args.config)
    if args.rest_host is not None:
        config['rest_host'] = args.rest_host
    if args.rest_port is not None:
        config['rest_port'] = args.rest_port

    # Create and start platform
    platform = CampusPlatform(config)

    if not args.serve:
        platform.run_demo()
        return

    try:
        platform.start_platform()

        # Keep running
        print("\nPlatform is running. Press Ctrl+C to stop.")
        while True:
            time.sleep(1)

    except KeyboardInterrupt:
        print("\nShutting down...")
        platform.stop_platform()


if __name__ == "__main__":
    main()
