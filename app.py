"""Tailored CV & Cover Letter Generator - Main Application

Gradio application that rewrites a CV and cover letter for a job description
and exports the results as DOCX or PDF.
"""
import sys
import os
import tempfile

# Add current directory to path for imports (for HuggingFace Spaces)
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import gradio as gr
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from doc_tailor.document_builder import FontManager
from doc_tailor.exceptions import DocTailorError, GenerationAuthenticationError
from doc_tailor.export_artifact import DocumentKind, ExportKind
from doc_tailor.exporter import ExportCoordinator, save_to_directory
from doc_tailor.generator import ChatCompletionGenerator
from doc_tailor.pipeline import TailoringPipeline
from doc_tailor.tailoring_options import TailoringOptions

# Initialize generation client
# API key should be set in .env or HF Space secrets as OPENAI_API_KEY
try:
    generator = ChatCompletionGenerator()
    print("Generation client initialized successfully!")
except GenerationAuthenticationError as e:
    print(f"Warning: {e}")
    print("Please set OPENAI_API_KEY in your .env file or HuggingFace Space secrets.")
    generator = None

# Fonts are registered once; every export re-renders from the session text
font_manager = FontManager(unicode_fonts=True)

# Exports land under fixed names in one shared directory, so each file is
# replaced by the next export of the same document and format
DOWNLOAD_DIR = os.path.join(tempfile.gettempdir(), "doc_tailor_downloads")


def generate_documents(cv: str, cover_letter: str, job_description: str, progress=gr.Progress()) -> tuple:
    """
    Generate tailored documents.

    Args:
        cv: Original CV text
        cover_letter: Original cover letter text (optional)
        job_description: Target job description text
        progress: Gradio progress tracker

    Returns:
        Tuple of (cv_text, cover_letter_text, documents_state, status)
    """
    if generator is None:
        raise gr.Error(
            "Generation API not configured. "
            "Please set OPENAI_API_KEY environment variable."
        )

    pipeline = TailoringPipeline(generator, progress_callback=lambda p, d: progress(p, desc=d))
    result = pipeline.process(TailoringOptions(
        cv=cv,
        job_description=job_description,
        cover_letter=cover_letter,
    ))

    if result.is_failed:
        raise gr.Error(result.status_message)

    documents = result.documents
    return documents.cv, documents.cover_letter, documents, result.status_message


def download_document(kind: str, active_document: str, documents) -> str:
    """
    Export the active tab's document.

    Args:
        kind: "flow" (DOCX) or "paginated" (PDF)
        active_document: "cv" or "cover_letter"
        documents: TailoredDocuments from session state

    Returns:
        Path of the exported file for the download component
    """
    if documents is None or not documents.cv or not documents.cover_letter:
        raise gr.Error("Please generate your documents first.")

    coordinator = ExportCoordinator(
        font_manager=font_manager,
        download=save_to_directory(DOWNLOAD_DIR),
    )

    try:
        return coordinator.export_document(kind, active_document, documents)
    except DocTailorError as e:
        raise gr.Error(f"Export failed: {str(e)}")


# Create Gradio interface
with gr.Blocks(title="Tailored CV & Cover Letter") as app:
    gr.Markdown("# 📄 Tailored CV & Cover Letter")
    gr.Markdown("Paste your CV, an optional cover letter and the job description.")

    documents_state = gr.State()
    active_document = gr.State(DocumentKind.CV.value)

    with gr.Row():
        with gr.Column():
            gr.Markdown("## Your Documents")

            cv_input = gr.Textbox(
                label="CV",
                lines=12,
                placeholder="Paste your current CV..."
            )

            cover_letter_input = gr.Textbox(
                label="Cover Letter (optional)",
                lines=8,
                placeholder="Paste your current cover letter..."
            )

            job_description_input = gr.Textbox(
                label="Job Description",
                lines=10,
                placeholder="Paste the job description..."
            )

            generate_btn = gr.Button(
                "✨ Generate Tailored Documents",
                variant="primary",
                size="lg"
            )

            main_status = gr.Textbox(
                label="Status",
                interactive=False
            )

        with gr.Column():
            gr.Markdown("## Your Tailored Documents")
            gr.Markdown("Review, copy, or download your customized CV and cover letter")

            with gr.Tabs():
                with gr.Tab("Tailored CV") as cv_tab:
                    cv_output = gr.Textbox(
                        label="Tailored CV",
                        lines=20,
                        interactive=False,
                        show_copy_button=True
                    )
                with gr.Tab("Tailored Cover Letter") as cover_letter_tab:
                    cover_letter_output = gr.Textbox(
                        label="Tailored Cover Letter",
                        lines=20,
                        interactive=False,
                        show_copy_button=True
                    )

            with gr.Row():
                docx_btn = gr.Button("📝 Download as DOCX")
                pdf_btn = gr.Button("📥 Download as PDF")

            output_file = gr.File(
                label="Download",
                type="filepath",
                visible=False
            )

    # Track which tab is active; exports always use the visible document
    cv_tab.select(fn=lambda: DocumentKind.CV.value, outputs=[active_document])
    cover_letter_tab.select(fn=lambda: DocumentKind.COVER_LETTER.value, outputs=[active_document])

    generate_btn.click(
        fn=generate_documents,
        inputs=[cv_input, cover_letter_input, job_description_input],
        outputs=[cv_output, cover_letter_output, documents_state, main_status]
    )

    docx_btn.click(
        fn=lambda active, documents: download_document(ExportKind.FLOW.value, active, documents),
        inputs=[active_document, documents_state],
        outputs=[output_file]
    ).then(
        fn=lambda: gr.update(visible=True),
        outputs=output_file
    )

    pdf_btn.click(
        fn=lambda active, documents: download_document(ExportKind.PAGINATED.value, active, documents),
        inputs=[active_document, documents_state],
        outputs=[output_file]
    ).then(
        fn=lambda: gr.update(visible=True),
        outputs=output_file
    )


if __name__ == "__main__":
    app.launch(ssr_mode=False)
