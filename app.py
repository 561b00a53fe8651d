#!/usr/bin/env python3
"""
Gradio page for the plant identifier.

Upload a plant photo, press analyze, read the identification. Each browser
session gets its own AnalysisController; the page is redrawn from
presentation.render() after every action.
"""
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import gradio as gr

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent / "src"))

from plant_identifier.app import PlantIdentifierApp
from plant_identifier.config_loader import load_config_from_env
from plant_identifier.intake import ImageFile
from plant_identifier.presentation import View, format_plant_details, render
from plant_identifier.session import AnalysisController, SessionControllerManager

config = load_config_from_env()

logging.basicConfig(
    level=logging.DEBUG if config.verbose else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

plant_app = PlantIdentifierApp(config)
messages = plant_app.messages
sessions: Optional[SessionControllerManager] = None


def initialize_app() -> SessionControllerManager:
    """Initialize the inference client and the session registry."""
    global sessions

    if sessions is not None:
        return sessions

    plant_app.initialize()
    sessions = SessionControllerManager(plant_app.create_controller)
    logger.info("Plant identifier initialized")
    return sessions


def _controller(request: gr.Request) -> AnalysisController:
    return initialize_app().get_controller(request.session_hash)


def _outputs(controller: AnalysisController) -> tuple:
    """Turn the controller's current view into component updates."""
    view: View = render(controller.state, controller.notice, messages)

    preview_path = None
    if view.preview is not None and view.preview in controller.previews:
        preview_path = str(controller.previews.resolve(view.preview))

    return (
        gr.update(value=f"## {view.heading}" if view.show_heading else "", visible=view.show_heading),
        gr.update(value=preview_path, visible=view.show_uploader),
        gr.update(visible=view.show_analyze),
        gr.update(visible=view.show_spinner),
        gr.update(value=f"**{view.error_message}**" if view.error_message else "", visible=view.error_message is not None),
        gr.update(value=format_plant_details(view.plant, messages) if view.show_result else "", visible=view.show_result),
        gr.update(visible=view.show_reset),
    )


async def on_upload(file_path: Optional[str], request: gr.Request) -> tuple:
    controller = _controller(request)
    if file_path:
        controller.select_image(ImageFile.from_path(file_path))
    else:
        controller.reset()
    return _outputs(controller)


async def on_analyze(request: gr.Request):
    controller = _controller(request)
    task = asyncio.create_task(controller.analyze())
    # Let analyze() reach its first await so the loading view is visible
    await asyncio.sleep(0)
    yield _outputs(controller)
    try:
        await task
    except Exception:
        logger.error("Unexpected error during analysis", exc_info=True)
    yield _outputs(controller)


async def on_reset(request: gr.Request) -> tuple:
    controller = _controller(request)
    controller.reset()
    return _outputs(controller)


async def on_unload(request: gr.Request) -> None:
    if sessions is not None:
        sessions.clear_controller(request.session_hash)


with gr.Blocks(title="Plant Identifier", theme=gr.themes.Soft()) as demo:
    gr.Markdown("# 🌱 Plant Identifier")

    heading = gr.Markdown(f"## {messages.heading}")
    image_input = gr.Image(
        label=messages.upload_label,
        type="filepath",
        sources=["upload"],
        height=400,
    )
    analyze_btn = gr.Button(messages.analyze_label, variant="primary", visible=False)
    spinner = gr.Markdown(f"⏳ {messages.loading_text}", visible=False)
    error_box = gr.Markdown(visible=False)
    result_box = gr.Markdown(visible=False)
    reset_btn = gr.Button(messages.reset_label, visible=False)

    outputs = [heading, image_input, analyze_btn, spinner, error_box, result_box, reset_btn]

    image_input.upload(on_upload, image_input, outputs)
    image_input.clear(on_reset, None, outputs)
    analyze_btn.click(on_analyze, None, outputs)
    reset_btn.click(on_reset, None, outputs)
    demo.unload(on_unload)


if __name__ == "__main__":
    try:
        initialize_app()
    except Exception as e:
        logger.error(f"Failed to initialize plant identifier: {e}", exc_info=True)
        raise

    demo.launch(
        server_name="0.0.0.0",
        server_port=int(os.getenv("PORT", 7860)),
        share=False
    )
