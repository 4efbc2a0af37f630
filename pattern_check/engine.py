"""
Pattern check engine.

Runs one pattern check step for the flow runner: reports the step as
running, evaluates every pattern against the payload, reduces the results
to one terminal outcome and reports that outcome exactly once.
"""

from dataclasses import asdict
from typing import Any, Optional

import structlog

from .config.defaults import MessageTemplates, PatternCheckConfig, get_default_config
from .config.validation import ConfigValidator
from .data.models import (
    ActionResult,
    ExecutionContext,
    ExecutionLike,
    FlowDefinition,
    FlowLike,
    StepIdentity,
    StepLike,
)
from .errors import (
    ConfigurationError,
    EvaluationError,
    ReportingError,
    SerializationError,
)
from .patterns.evaluator import PatternEvaluator
from .patterns.models import EvaluationResult, PatternOperator
from .reporting.base import BaseStepReporter
from .state.lifecycle import StepLifecycle
from .state.models import StepOutcome, StepUpdate
from .state.reducer import count_mismatches, reduce_outcome
from .utils.time import utc_now

logger = structlog.get_logger(__name__)


class PatternCheckEngine:
    """
    Invocation entry point of the pattern check action.

    Holds only its reporter, configuration and evaluator; every call to
    execute works on its own inputs, so one engine can serve concurrent
    steps.
    """

    def __init__(
        self,
        reporter: BaseStepReporter,
        config: Optional[PatternCheckConfig] = None,
        evaluator: Optional[PatternEvaluator] = None
    ) -> None:
        self.reporter = reporter
        self.config = config or get_default_config()
        self._check_messages()
        self.evaluator = evaluator or PatternEvaluator(self.config)
        self.logger = logger

    def _check_messages(self) -> None:
        errors = ConfigValidator.validate_messages(asdict(self.config.messages))
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                "Invalid message templates: " + "; ".join(error_msgs),
                errors=errors
            )

    @property
    def messages(self) -> MessageTemplates:
        return self.config.messages

    def execute(
        self,
        execution: ExecutionLike,
        flow: FlowLike,
        payload: Any,
        step: StepLike
    ) -> ActionResult:
        """
        Run a pattern check step.

        Args:
            execution: Execution context or mapping with ``id``
            flow: Flow definition or mapping with ``patterns``
            payload: Event data to check, read-only
            step: Step identity or mapping with ``id`` and ``action_id``

        Returns:
            ActionResult carrying the terminal outcome

        Raises:
            ConfigurationError: If execution or step identity is missing
        """
        execution = self._as_execution(execution)
        step = self._as_step(step)
        lifecycle = StepLifecycle(step.id)
        log = self.logger.bind(execution_id=execution.id, step_id=step.id)

        lifecycle.start()

        try:
            self._report(execution, StepUpdate(
                step_id=step.id,
                action_id=step.action_id,
                messages=[self.messages.checking],
                pending=False,
                running=True,
                started_at=utc_now(),
            ))

            flow = self._as_flow(flow)

            if not flow.patterns:
                self._report(execution, StepUpdate(
                    step_id=step.id,
                    messages=[self.messages.no_patterns],
                    running=False,
                    finished=True,
                    finished_at=utc_now(),
                ))
                log.info("No patterns defined, continuing")
                return self._finish(lifecycle, StepOutcome.CONTINUE, trigger="no_patterns")

            results = self.evaluator.evaluate(
                payload,
                flow.patterns,
                on_result=lambda result: self._report_result(execution, step, result),
                step_id=step.id,
            )

            return self._conclude(execution, step, lifecycle, results)

        except ReportingError as e:
            log.error("Step update could not be reported", error=str(e), reporter=e.reporter)
            return self._finish(lifecycle, StepOutcome.FAILED, trigger="reporting_failed",
                                context={"error": str(e)})

        except SerializationError as e:
            log.error("Error converting payload to JSON", error=str(e), payload_type=e.payload_type)
            self._report_failure(execution, step, self.messages.serialization_failed.format(error=e))
            return self._finish(lifecycle, StepOutcome.FAILED, trigger="serialization_failed",
                                context={"error": str(e)})

        except (EvaluationError, ConfigurationError) as e:
            log.error("Pattern evaluation failed", error=str(e), error_type=type(e).__name__)
            self._report_failure(execution, step, self.messages.evaluation_failed.format(error=e))
            return self._finish(lifecycle, StepOutcome.FAILED, trigger="evaluation_failed",
                                context={"error": str(e)})

    def _conclude(
        self,
        execution: ExecutionContext,
        step: StepIdentity,
        lifecycle: StepLifecycle,
        results: list[EvaluationResult]
    ) -> ActionResult:
        """Report the terminal update for a completed evaluation."""
        outcome = reduce_outcome(results)
        context = {
            "pattern_count": len(results),
            "mismatch_count": count_mismatches(results),
        }

        if outcome == StepOutcome.NO_PATTERN_MATCH:
            self._report(execution, StepUpdate(
                step_id=step.id,
                messages=[self.messages.some_mismatched],
                running=False,
                canceled=False,
                no_pattern_match=True,
                finished=True,
                finished_at=utc_now(),
            ))
            return self._finish(lifecycle, outcome, trigger="patterns_mismatched", context=context)

        self._report(execution, StepUpdate(
            step_id=step.id,
            messages=[self.messages.all_matched],
            running=False,
            finished=True,
            finished_at=utc_now(),
        ))
        return self._finish(lifecycle, outcome, trigger="patterns_matched", context=context)

    def _report_result(self, execution: ExecutionContext, step: StepIdentity,
                       result: EvaluationResult) -> None:
        # canceled on a mismatch is informational; the terminal update decides the outcome
        self._report(execution, StepUpdate(
            step_id=step.id,
            messages=[self.format_result_message(result)],
            canceled=True if not result.matched else None,
        ))

    def format_result_message(self, result: EvaluationResult) -> str:
        """Human-readable message for one pattern result."""
        if result.operator == PatternOperator.EQUALS:
            template = self.messages.equals_matched if result.matched else self.messages.equals_mismatched
        elif result.operator == PatternOperator.NOT_EQUALS:
            template = self.messages.not_equals_matched if result.matched else self.messages.not_equals_mismatched
        else:
            template = self.messages.unknown_operator

        return template.format(key=result.key, value=result.expected_value, type=result.pattern.type)

    def _report(self, execution: ExecutionContext, update: StepUpdate) -> None:
        self.reporter.report(execution.id, update)

    def _report_failure(self, execution: ExecutionContext, step: StepIdentity, message: str) -> None:
        """Best-effort terminal update for a failed step."""
        try:
            self._report(execution, StepUpdate(
                step_id=step.id,
                messages=[message],
                running=False,
                error=True,
                finished=True,
                finished_at=utc_now(),
            ))
        except ReportingError as e:
            self.logger.error(
                "Failure update could not be reported",
                execution_id=execution.id,
                step_id=step.id,
                error=str(e)
            )

    def _finish(self, lifecycle: StepLifecycle, outcome: StepOutcome, trigger: str,
                context: Optional[dict[str, Any]] = None) -> ActionResult:
        lifecycle.finish(outcome, trigger=trigger, context=context)
        return ActionResult(outcome=outcome)

    def _as_execution(self, execution: ExecutionLike) -> ExecutionContext:
        if isinstance(execution, ExecutionContext):
            return execution
        return ExecutionContext.from_dict(execution)

    def _as_step(self, step: StepLike) -> StepIdentity:
        if isinstance(step, StepIdentity):
            return step
        return StepIdentity.from_dict(step)

    def _as_flow(self, flow: FlowLike) -> FlowDefinition:
        if isinstance(flow, FlowDefinition):
            return flow
        return FlowDefinition.from_dict(flow, strict_operators=self.config.strict_operators)
