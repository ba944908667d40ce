import logging

import gradio as gr

from json_csv_converter import config
from json_csv_converter.handlers import convert_handler, load_json_with_preview

# --- UI Definition ---
with gr.Blocks(title="JSON to CSV Converter") as demo:
    gr.Markdown("# JSON to CSV Converter")
    gr.Markdown("Upload a JSON object or an array of objects. Nested fields become dotted columns, arrays are kept as JSON text.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            document_count = gr.Textbox(label="Document Count", interactive=False)

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 2. Output")
            output_path = gr.Textbox(label="Output CSV", placeholder=f"{config.EXPORT_DIR}/output.csv")
            with gr.Row():
                delimiter = gr.Textbox(label="Delimiter", value=config.DEFAULT_DELIMITER, max_lines=1, info="e.g. , ; \\t")
                overwrite = gr.Checkbox(label="Overwrite if exists", value=False)

            gr.Markdown("### 3. Convert")
            convert_btn = gr.Button("Convert", variant="primary")
            download_output = gr.File(label="Download Result")

    preview = gr.JSON(label=f"Preview (first {config.PREVIEW_LIMIT} rows)")
    log_area = gr.Textbox(label="Log", lines=10, interactive=False)

    file_input.upload(
        fn=load_json_with_preview,
        inputs=[file_input, output_path],
        outputs=[status_msg, document_count, preview, output_path],
    )

    convert_btn.click(
        fn=convert_handler,
        inputs=[file_input, output_path, delimiter, overwrite, log_area],
        outputs=[download_output, log_area],
    )

if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    demo.launch(allowed_paths=[config.EXPORT_DIR])
