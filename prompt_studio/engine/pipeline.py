"""End-to-end pipeline: transform, optionally enhance remotely, validate, cache."""

import asyncio
import uuid
from typing import Optional

from prompt_studio.adapters.base import (
    BaseEnhancementAdapter,
    FailureKind,
    PromptCategory,
    RemoteAdapterError,
    RemoteCompletion,
    RemoteFailure,
    RemoteSuccess,
    detect_category,
)
from prompt_studio.engine.transformer import MetaPromptTransformer
from prompt_studio.engine.validator import PromptQualityValidator
from prompt_studio.models import (
    EnhancementOutcome,
    PromptTransformationResult,
    TransformationType,
)
from prompt_studio.utils.cache import ResultCache
from prompt_studio.utils.config import Settings, get_settings
from prompt_studio.utils.logger import PipelineLogger, get_logger
from prompt_studio.utils.metrics import PhaseTimer, UsageMetrics
from prompt_studio.utils.sanitization import cache_key, normalize_prompt, validate_prompt_length

logger = get_logger()


class PromptPipeline:
    """Runs a request through the local engine and the optional remote step.

    The local result is always computed first. Any remote failure or timeout
    degrades to that result with ``enhancement_error`` set; it is never
    raised to the caller. Only input errors propagate.
    """

    def __init__(
        self,
        transformer: Optional[MetaPromptTransformer] = None,
        validator: Optional[PromptQualityValidator] = None,
        adapter: Optional[BaseEnhancementAdapter] = None,
        cache: Optional[ResultCache] = None,
        settings: Optional[Settings] = None,
        usage_metrics: Optional[UsageMetrics] = None,
    ):
        """Initialize the pipeline.

        Args:
            transformer: Local transformer; a default one is built if omitted.
            validator: Quality validator.
            adapter: Remote enhancement adapter; None disables the remote step.
            cache: Result cache; defaults to one using the configured TTL.
            settings: Application settings.
            usage_metrics: Shared usage counters.
        """
        self.settings = settings or get_settings()
        self.transformer = transformer or MetaPromptTransformer()
        self.validator = validator or PromptQualityValidator()
        self.adapter = adapter
        self.cache = cache if cache is not None else ResultCache(self.settings.cache_ttl_seconds)
        self.usage_metrics = usage_metrics or UsageMetrics()

    def process_local(self, text: str) -> EnhancementOutcome:
        """Transform and validate without the remote step or the cache.

        Raises:
            InputTooShortError: If the trimmed request is under two characters.
        """
        request_id = uuid.uuid4().hex[:8]
        request = normalize_prompt(text).text

        with PhaseTimer(self.usage_metrics, "transform"):
            transformation = self.transformer.transform(request)
        with PhaseTimer(self.usage_metrics, "validate"):
            validation = self.validator.validate(transformation)

        return EnhancementOutcome(
            request_id=request_id,
            category=detect_category(request).value,
            transformation=transformation,
            validation=validation,
        )

    async def enhance(self, text: str) -> EnhancementOutcome:
        """Transform a request and refine it with the remote model when available.

        Args:
            text: The raw request.

        Returns:
            EnhancementOutcome. ``transformation.local_only`` is False only
            when the remote model produced the final prompt.

        Raises:
            InputTooShortError: If the trimmed request is under two characters.
            InputTooLongError: If the request exceeds ``max_prompt_length``.
        """
        request_id = uuid.uuid4().hex[:8]
        plog = PipelineLogger(request_id)

        request = validate_prompt_length(
            normalize_prompt(text).text,
            max_length=self.settings.max_prompt_length,
        )
        key = cache_key(request)

        cached = self.cache.get(key)
        if cached is not None:
            plog.log_cache_hit(key)
            self.usage_metrics.record_cache_hit()
            return cached.model_copy(update={"cached": True})

        with PhaseTimer(self.usage_metrics, "transform"):
            local = self.transformer.transform(request)
        plog.log_transformation(local.template_used or "", local.quality_score)

        category = detect_category(request)
        result = local
        model = None

        if self.adapter is not None:
            with PhaseTimer(self.usage_metrics, "enhance"):
                completion = await self._call_adapter(local.transformed_prompt, category)

            if isinstance(completion, RemoteSuccess):
                self.usage_metrics.add_usage(completion.usage)
                model = completion.model
                result = self._merge_enhancement(local, completion)
                plog.log_event("enhanced", message=f"model={completion.model}")
            else:
                self.usage_metrics.record_fallback()
                plog.log_fallback(completion.kind.value, completion.message)
                result = local.model_copy(update={"enhancement_error": completion.kind.value})

        with PhaseTimer(self.usage_metrics, "validate"):
            validation = self.validator.validate(result)

        outcome = EnhancementOutcome(
            request_id=request_id,
            category=category.value,
            transformation=result,
            validation=validation,
            model=model,
        )
        # Fallbacks are not cached so the next request retries the remote step.
        if result.enhancement_error is None:
            self.cache.set(key, outcome)
        logger.debug(
            f"[{request_id}] Pipeline finished: category={category.value} "
            f"local_only={result.local_only} score={validation.overall_score}"
        )
        return outcome

    async def _call_adapter(self, prompt: str, category: PromptCategory) -> RemoteCompletion:
        timeout = self.settings.enhancement_timeout
        try:
            return await asyncio.wait_for(self.adapter.enhance(prompt, category), timeout=timeout)
        except asyncio.TimeoutError:
            return RemoteFailure(FailureKind.NETWORK_ERROR, f"Timed out after {timeout:.1f}s")
        except RemoteAdapterError as e:
            return RemoteFailure(e.kind, e.message)
        except Exception as e:
            logger.error(f"Enhancement adapter raised unexpectedly: {e}")
            return RemoteFailure(FailureKind.MALFORMED_RESPONSE, str(e) or e.__class__.__name__)

    @staticmethod
    def _merge_enhancement(
        local: PromptTransformationResult, completion: RemoteSuccess
    ) -> PromptTransformationResult:
        return local.model_copy(
            update={
                "transformed_prompt": completion.text,
                "transformation_type": TransformationType.ENHANCED_PROMPT,
                "improvements": local.improvements + [f"Refined by remote model {completion.model}"],
                "local_only": False,
                "enhancement_error": None,
            }
        )
