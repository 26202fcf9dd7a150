import sys
import argparse
from typing import Callable, List, Optional
import structlog

from .config import (
    DEBUG_MODE,
    VALID_LOG_LEVELS,
    configure_logging,
    validate_configuration,
)
from .constants import DISTANCE_DISPLAY_PRECISION
from .data_models import EnrollResult, RecognizeResult
from .exceptions import CodeDecodeError, ConfigurationError, IdentityNotFoundError
from .identity_store import IdentityStore
from .matcher import IrisMatcher
from .utils import format_distance, generate_session_id

# Initialize structured logger
logger = structlog.get_logger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

ENROLLMENT_BANNER = "=====\nEnrollment phase:"
RECOGNITION_BANNER = "=====\nRecognition phase:"
FAREWELL = "Goodbye!"

NAME_PROMPT = "Name: "
EMPTY_NAME_PROMPT = "Empty input! \nPlease enter a name: "
NAME_NOT_FOUND_PROMPT = "Sorry, name not found. \nPlease enter a name again: "
CODE_PROMPT = "Iris code (in hex please): "
INVALID_CODE_PROMPT = "Invalid input! \nPlease enter a hex number (less than 63 bits): "
MORE_DATA_PROMPT = "More data? (y/n): "


class InteractiveSession:
    """
    Terminal driver for one enrollment phase followed by one recognition phase.

    Each phase collects (name, code) pairs until the user answers ``n`` to
    ``More data?``. Invalid input never reaches the store: blank or unknown
    names and undecodable codes are re-prompted.

    Parameters
    ----------
    matcher : IrisMatcher
        Engine the collected pairs are submitted to.
    input_func : Callable[[str], str], default=input
        Prompts the user and returns one line of input.
    output_func : Callable[[str], None], default=print
        Displays one message.
    """

    def __init__(
        self,
        matcher: IrisMatcher,
        input_func: InputFunc = input,
        output_func: OutputFunc = print,
    ) -> None:
        self.matcher = matcher
        self.input_func = input_func
        self.output_func = output_func
        self.session_id = generate_session_id()
        self.log = logger.bind(session_id=self.session_id)

    def run(self) -> None:
        """Run the enrollment phase, then the recognition phase."""
        self.log.info("Session started")

        self.output_func(ENROLLMENT_BANNER)
        enrolled = self.execute_phase(self.enroll_once)

        self.output_func(RECOGNITION_BANNER)
        recognized = self.execute_phase(self.recognize_once)

        self.output_func(FAREWELL)
        self.log.info(
            "Session completed", enrollments=enrolled, recognitions=recognized
        )

    def execute_phase(self, operation: Callable[[str, str], None]) -> int:
        """
        Repeat ``operation`` until the user declines more data.

        The phase is an enrollment phase if the store is empty when it
        starts; otherwise names must already be enrolled.

        Returns
        -------
        int
            Number of completed operations.
        """
        enroll_phase = self.matcher.is_empty()
        completed = 0

        while True:
            self._run_once(operation, enroll_phase)
            completed += 1

            answer = self.input_func(MORE_DATA_PROMPT)
            if answer.strip().lower() == "n":
                return completed

    def _run_once(
        self, operation: Callable[[str, str], None], enroll_phase: bool
    ) -> None:
        name = self.request_identity(enroll_phase)
        code_prompt = CODE_PROMPT

        while True:
            raw_code = self.request_code(code_prompt)
            try:
                operation(name, raw_code)
                return
            except CodeDecodeError as e:
                self.log.debug("Invalid iris code entered", error=e.to_dict())
                code_prompt = INVALID_CODE_PROMPT
            except IdentityNotFoundError as e:
                self.log.debug("Identity not found", error=e.to_dict())
                name = self.request_identity(enroll_phase, NAME_NOT_FOUND_PROMPT)
                code_prompt = CODE_PROMPT

    def request_identity(self, enroll_phase: bool, prompt: str = NAME_PROMPT) -> str:
        """
        Ask for a name until a usable one is entered.

        Blank names are always rejected. Outside the enrollment phase the
        name must also be enrolled already.
        """
        while True:
            name = self.input_func(prompt)
            if not name.strip():
                prompt = EMPTY_NAME_PROMPT
            elif not enroll_phase and not self.matcher.is_known(name):
                prompt = NAME_NOT_FOUND_PROMPT
            else:
                return name

    def request_code(self, prompt: str = CODE_PROMPT) -> str:
        """Ask for a raw hex iris code."""
        return self.input_func(prompt)

    def enroll_once(self, name: str, raw_code: str) -> None:
        """Enroll one identity and display the stored code."""
        result = self.matcher.enroll(name, raw_code)
        self._display_enroll_result(result)

    def recognize_once(self, name: str, raw_code: str) -> None:
        """Recognize one claim and display distance and decision."""
        result = self.matcher.recognize(name, raw_code)
        self._display_recognize_result(result)

    def _display_enroll_result(self, result: EnrollResult) -> None:
        self.output_func(
            f">> {result.name}'s iris code (in binary) = {result.code.bits} recorded"
        )

    def _display_recognize_result(self, result: RecognizeResult) -> None:
        distance = format_distance(result.distance, DISTANCE_DISPLAY_PRECISION)
        self.output_func(f"Hamming Distance = {distance}")
        self.output_func(f"Access {result.decision} for {result.name}")


class IrisMatcherCLI:
    """Main command-line interface for the iris matcher."""

    def __init__(
        self, input_func: InputFunc = input, output_func: OutputFunc = print
    ) -> None:
        self.parser = self._create_argument_parser()
        self.input_func = input_func
        self.output_func = output_func

    def _create_argument_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            prog="iris-matcher",
            description="Enroll iris codes, then authenticate them by Hamming distance.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument(
            "--log-level",
            choices=VALID_LOG_LEVELS,
            type=str.upper,
            default=None,
            help="Override the LOG_LEVEL setting for this run.",
        )
        parser.add_argument(
            "--json-logs",
            action="store_true",
            help="Write log events as JSON lines.",
        )
        return parser

    def run_from_args(self, args_list: Optional[List[str]] = None) -> int:
        """Run an interactive session with the provided arguments."""
        args = self.parser.parse_args(args_list)

        try:
            # --log-level replaces LOG_LEVEL, so only an unoverridden setting is checked
            if args.log_level is None and not DEBUG_MODE:
                validate_configuration()
            configure_logging(args.log_level, True if args.json_logs else None)

            matcher = IrisMatcher(IdentityStore())
            session = InteractiveSession(
                matcher, input_func=self.input_func, output_func=self.output_func
            )
            session.run()
            return 0

        except KeyboardInterrupt:
            print("\nOperation cancelled by user.", file=sys.stderr)
            return 130
        except ConfigurationError as e:
            print("Something wrong.", file=sys.stderr)
            print(str(e), file=sys.stderr)
            return 1
        except EOFError:
            logger.error("Input ended before the session completed")
            print("Something wrong.", file=sys.stderr)
            print("Input ended unexpectedly.", file=sys.stderr)
            return 1
        except Exception as e:
            logger.error(f"An unexpected fatal error occurred: {e}", exc_info=True)
            print("Something wrong.", file=sys.stderr)
            print(str(e), file=sys.stderr)
            return 1


def main(args_list: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = IrisMatcherCLI()
    return cli.run_from_args(args_list)


if __name__ == "__main__":
    sys.exit(main())
