# -*- coding: utf-8 -*-
"""Gradio front-end for the map navigator."""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional

import gradio as gr

from ..config import get_config
from ..container import Container
from ..domain.models import MapProvider
from ..observability import configure_logging
from ..services.request_handler import RequestHandler
from . import handlers

logger = logging.getLogger(__name__)


def build_app(container: Container) -> gr.Blocks:
    """Build the Blocks layout wired to the container's RequestHandler."""
    request_handler: RequestHandler = container.resolve(RequestHandler)
    sample_rate = container.config.speech.sample_rate

    with gr.Blocks(title="地图导航助手") as app:
        gr.Markdown(
            """
# 🗺️ 地图导航助手
输入或说出出行需求（例如：从北京西站到天安门），自动打开地图导航。
"""
        )

        with gr.Row():
            text_input = gr.Textbox(
                label="📝 导航需求", lines=2, placeholder="从哪里到哪里..."
            )
            provider_radio = gr.Radio(
                handlers.PROVIDER_CHOICES,
                value=MapProvider.AMAP.value,
                label="🗺️ 地图",
            )

        with gr.Row():
            lng_input = gr.Number(label="📍 当前经度 (可选)", value=None)
            lat_input = gr.Number(label="📍 当前纬度 (可选)", value=None)

        with gr.Row():
            audio_file = gr.Audio(type="filepath", label="🎤 语音输入")

        with gr.Row():
            btn_transcribe = gr.Button("🎙️ 识别语音")
            btn_navigate = gr.Button("🚀 开始导航", variant="primary")

        status = gr.Textbox(label="状态", lines=2)

        btn_transcribe.click(
            partial(handlers.transcribe, request_handler, sample_rate=sample_rate),
            inputs=[audio_file],
            outputs=[text_input, status],
        )
        btn_navigate.click(
            partial(handlers.navigate, request_handler),
            inputs=[text_input, provider_radio, lng_input, lat_input],
            outputs=status,
        )

    return app


def main(container: Optional[Container] = None) -> None:
    """Console entry point: configure logging, build the UI and serve it."""
    config = container.config if container is not None else get_config()
    configure_logging(config.observability)
    container = container or Container.create_default(config)

    app = build_app(container)
    logger.info(
        "Starting navigator UI",
        extra={"host": config.ui.host, "port": config.ui.port},
    )
    app.launch(server_name=config.ui.host, server_port=config.ui.port)


if __name__ == "__main__":
    main()
