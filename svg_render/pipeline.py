"""SVG Render Pipeline

Main orchestration logic for turning an extracted content stream into pages.
"""
import asyncio
import dataclasses
import os
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from PIL import Image as PILImage

from .config import PROGRESS_STEPS
from .content import Content, Image, content_from_dict
from .exceptions import ContentParseError, InputWarning, PipelineStepError
from .logging_config import get_logger
from .page_builder import FontMetricsProvider, SvgPageBuilder
from .render_options import RenderOptions
from .render_result import RenderResult
from .utils import URL_PREFIXES, compose_image_path

logger = get_logger(__name__)

ContentInput = Union[Content, Dict[str, Any]]


class SvgRenderPipeline:
    """SVG render pipeline orchestrator.

    This class orchestrates the complete layout workflow:
    1. Validation - build RenderOptions from a dict or take them as is
    2. Parsing - convert extractor dictionaries into content items
    3. Image sizes - optionally read missing image sizes from disk
    4. Layout - run a fresh SvgPageBuilder over the stream and finalize it

    Every run uses its own builder, so one pipeline can serve several
    chapters, concurrently or not.

    Attributes:
        metrics: Font metrics provider shared by every run
        progress_callback: Optional callback for progress updates (progress, desc)
        read_image_sizes: If True, fill in missing image width/height with Pillow
    """

    def __init__(
        self,
        metrics: Optional[FontMetricsProvider] = None,
        progress_callback: Optional[Callable[[float, str], None]] = None,
        read_image_sizes: bool = False,
    ):
        """Initialize pipeline.

        Args:
            metrics: Font metrics provider; each builder defaults to ReportLab metrics when None
            progress_callback: Optional function(progress: float, desc: str) for progress updates
            read_image_sizes: If True, open images under image_root to learn their size
        """
        self.metrics = metrics
        self.progress = progress_callback or (lambda p, d: None)
        self.read_image_sizes = read_image_sizes

    async def render(
        self,
        contents: Iterable[ContentInput],
        options: Union[RenderOptions, Dict[str, Any], None] = None,
    ) -> RenderResult:
        """Execute the complete layout pipeline.

        Args:
            contents: Content items or their dictionary form, in reading order
            options: RenderOptions or a dict overlaid on the defaults

        Returns:
            RenderResult with pages, warnings and status

        Raises:
            Does not raise - all errors are captured in RenderResult.error
        """
        warnings: List[InputWarning] = []
        try:
            # Step 1: Validation
            self.progress(PROGRESS_STEPS["VALIDATE"], "Validating render options...")
            render_options = options if isinstance(options, RenderOptions) else RenderOptions.from_dict(options)

            # Step 2: Parsing
            self.progress(PROGRESS_STEPS["PARSE"], "Parsing content...")
            items = self._parse_contents(contents, warnings)

            # Step 3: Optional image sizes
            if self.read_image_sizes:
                self.progress(PROGRESS_STEPS["READ_IMAGE_SIZES"], "Reading image sizes...")
                items = [(index, self._read_image_size(content, render_options)) for index, content in items]

            # Step 4: Layout
            pages, layout_warnings = await self._layout(items, render_options)
            warnings.extend(layout_warnings)

            self.progress(PROGRESS_STEPS["COMPLETE"], "Complete!")
            message = f"Rendered {len(pages)} page(s)"
            if warnings:
                message += f", {len(warnings)} element(s) skipped"
            return RenderResult(
                status="completed",
                status_message=message,
                pages=pages,
                warnings=warnings,
            )

        except Exception as e:
            logger.error(f"Layout failed: {e}")
            return RenderResult(
                status="failed",
                status_message=f"Layout failed: {str(e)}",
                warnings=warnings,
                error=str(e),
            )

    def process(
        self,
        contents: Iterable[ContentInput],
        options: Union[RenderOptions, Dict[str, Any], None] = None,
    ) -> RenderResult:
        """Synchronous wrapper around render() for callers without an event loop."""
        return asyncio.run(self.render(contents, options))

    def _parse_contents(
        self,
        contents: Iterable[ContentInput],
        warnings: List[InputWarning],
    ) -> List[Tuple[int, Content]]:
        """Convert dictionaries into content items; malformed ones become warnings.

        Returns:
            List of (index in the input stream, content item)
        """
        items = []
        for index, item in enumerate(contents):
            if isinstance(item, dict):
                try:
                    item = content_from_dict(item)
                except ContentParseError as e:
                    warning = InputWarning(str(e), content_index=index, content_type=str(item.get("type", "")))
                    logger.warning(str(warning))
                    warnings.append(warning)
                    continue
            items.append((index, item))
        return items

    def _read_image_size(self, content: Content, options: RenderOptions) -> Content:
        """Fill in a missing image size from the image file, when it can be read."""
        if not isinstance(content, Image) or (content.width and content.height) or not content.src:
            return content

        image_path = compose_image_path(options.image_root, content.src)
        if image_path.startswith(URL_PREFIXES) or not os.path.exists(image_path):
            logger.debug(f"Image not found locally, size unknown: {image_path}")
            return content

        try:
            with PILImage.open(image_path) as img:
                img_width, img_height = img.size
        except Exception as e:
            logger.warning(f"Could not read image size of {image_path}: {e}")
            return content

        logger.debug(f"Read size of image {image_path}: {img_width}x{img_height}")
        return dataclasses.replace(content, width=img_width, height=img_height)

    async def _layout(
        self,
        items: List[Tuple[int, Content]],
        options: RenderOptions,
    ) -> Tuple[list, List[InputWarning]]:
        """Run a fresh builder over the items and finalize it.

        Raises:
            PipelineStepError: Wrapping any layout failure (e.g. MetricFailure)
        """
        start = PROGRESS_STEPS["LAYOUT_START"]
        end = PROGRESS_STEPS["LAYOUT_END"]
        self.progress(start, "Laying out pages...")

        try:
            builder = SvgPageBuilder(options, self.metrics)
            for position, (_, content) in enumerate(items):
                await builder.add_content(content)
                self.progress(
                    start + (end - start) * (position + 1) / len(items),
                    f"Laid out {position + 1}/{len(items)} elements",
                )
            pages = builder.finalize()
        except Exception as e:
            raise PipelineStepError("layout", e) from e

        # Builder warnings count only the items it saw; map them back to stream positions
        warnings = []
        for warning in builder.warnings:
            index = warning.content_index
            if index is not None and index < len(items):
                index = items[index][0]
            warnings.append(InputWarning(warning.reason, content_index=index, content_type=warning.content_type))
        return pages, warnings
