import copy
from io import BytesIO
from types import SimpleNamespace

import pytest
from docx import Document

SAMPLE_CV = (
    "Jane Doe - Data Scientist\n\n"
    "Work Experience\n"
    "Acme Corp (2019-2024): Built a RAG assistant with LangChain and a vector database, "
    "deployed as a FastAPI service on Kubernetes with CI/CD. Fine-tuned Hugging Face "
    "Transformers for ticket routing, cutting support costs by 18%.\n\n"
    "Projects\n"
    "Streamlit demo for churn prediction with PyTorch; A/B tested pricing model.\n"
)

VALID_RESULT = {
    "overallScore": 58,
    "function": "data_science",
    "functionLabel": "Data Science",
    "experienceLevel": "experienced",
    "yearsOfExperience": 5,
    "parameters": [
        {
            "name": "Modern Tool Stack",
            "weight": 40,
            "score": 70,
            "weightedScore": 28,
            "positiveIndicators": ["LangChain RAG assistant", "Hugging Face fine-tuning"],
            "negativeIndicators": ["No MLOps monitoring mentioned"],
            "reasoning": "Modern LLM tooling used in work experience.",
        },
        {
            "name": "Deployment & Application",
            "weight": 60,
            "score": 50,
            "weightedScore": 30,
            "positiveIndicators": ["FastAPI service on Kubernetes"],
            "negativeIndicators": ["Limited quantified revenue impact"],
            "reasoning": "One production deployment with measured cost savings.",
        },
    ],
    "validationNotes": ["Tools verified in Work Experience section"],
    "riskPenaltyApplied": False,
    "riskPenaltyReason": None,
    "summary": "Solid hands-on LLM experience with one production deployment.",
    "recommendations": ["Add model monitoring", "Quantify revenue impact", "Publish a deployed demo"],
}


@pytest.fixture
def valid_result():
    return copy.deepcopy(VALID_RESULT)


@pytest.fixture
def sample_cv():
    return SAMPLE_CV


class FakeCompletions:
    """Stands in for client.chat.completions; records calls."""

    def __init__(self, content=None, exc=None, choices=True):
        self.content = content
        self.exc = exc
        self.choices = choices
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        if not self.choices:
            return SimpleNamespace(choices=[])
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))])


class FakeClient:
    def __init__(self, content=None, exc=None, choices=True):
        self.chat = SimpleNamespace(completions=FakeCompletions(content, exc, choices))
        self.closed = False

    async def close(self):
        self.closed = True

    @property
    def calls(self):
        return self.chat.completions.calls


@pytest.fixture
def fake_client_cls():
    return FakeClient


def build_docx(paragraphs, table_rows=None) -> bytes:
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def build_pdf(lines) -> bytes:
    """Single-page PDF with Helvetica text lines (no parentheses in lines)."""
    stream = "BT /F1 12 Tf 14 TL 72 720 Td " + " ".join(f"({line}) Tj T*" for line in lines) + " ET"
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        "/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = "%PDF-1.4\n"
    offsets = []
    for i, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{i} 0 obj\n{body}\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n"
    out += "".join(f"{off:010d} 00000 n \n" for off in offsets)
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n"
    return out.encode("latin-1")
