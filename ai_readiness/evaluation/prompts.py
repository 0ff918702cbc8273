"""Role-specific instruction prompts for the AI readiness evaluator model."""

from config import AVAILABLE_ROLES, RISK_PENALTY_POINTS

ROLE_LABELS = {key: role["label"] for key, role in AVAILABLE_ROLES.items()}

OUTPUT_SCHEMA_TEMPLATE = """## OUTPUT SCHEMA (Required - All fields must be present)
{{
  "overallScore": number (0-100),
  "function": "{role}",
  "functionLabel": "string",
  "experienceLevel": "fresher" | "experienced",
  "yearsOfExperience": number,
  "parameters": [
    {{
      "name": "string",
      "weight": number (percentage),
      "score": number (0-100),
      "weightedScore": number,
      "positiveIndicators": [string],
      "negativeIndicators": [string],
      "reasoning": "string"
    }}
  ],
  "validationNotes": [string],
  "riskPenaltyApplied": boolean,
  "riskPenaltyReason": string | null,
  "summary": "string",
  "recommendations": [string]
}}"""

DATA_SCIENCE_RULES = """## DATA SCIENCE EVALUATION RULES

**Parameter 1: Modern Tool Stack (40% weight)**
- Positive: Transformers, Hugging Face, LangChain, Vertex AI, MLOps, Vector DBs, OpenAI API, Claude API, RAG, fine-tuning, PyTorch, TensorFlow
- Negative Indicators to ALWAYS capture (if absent):
  * No mention of modern ML frameworks (Transformers, PyTorch, TensorFlow, Scikit-learn)
  * Reliance on Excel-based models or business intelligence tools
  * No evidence of LLM/GenAI experience (ChatGPT, Claude, Gemini APIs)
  * Missing vector database or semantic search experience
  * No ML operations or model deployment experience
  * Outdated tools: SAS, SPSS, R without modern frameworks
- Score based on evidence in Work Experience or Projects ONLY (Skills lists get 80% discount)

**Parameter 2: Deployment & Application (60% weight)**
- Positive: Deployed API, Streamlit/Gradio/FastAPI apps, CI/CD pipelines, Production ML, user-facing impact, revenue metrics, A/B testing
- Negative Indicators to ALWAYS capture (if absent):
  * No deployed models or applications mentioned
  * Only training/analysis with no real-world application
  * No evidence of production environment experience
  * Missing quantified business impact (revenue, cost savings, user metrics)
  * No CI/CD or DevOps practices mentioned
  * Purely academic/theoretical projects without deployment
  * No evidence of handling production data at scale
- Score based on evidence in Work Experience or Projects ONLY

**Experience-Based Rules:**
- Fresher (0-2 years): Score personal projects and hackathons. Ignore lack of enterprise impact. Look for learning velocity.
- Experienced (3+ years): Penalize high "legacy skill" density without recent AI adoption. Expect production experience.

**Risk Penalty:** If >50% of CV bullets describe fully automatable tasks (data cleaning, reporting, dashboards), deduct {penalty} points."""

DIGITAL_MARKETING_RULES = """## DIGITAL MARKETING EVALUATION RULES

**Parameter 1: AI-Augmented Workflow (50% weight)**
- Positive: Programmatic SEO, Automation (Zapier/Make), GenAI for content, Dynamic Creative, AI copywriting, Predictive analytics
- Negative Indicators to ALWAYS capture (if absent):
  * Manual campaign management with no automation tools
  * No use of AI/ML for content creation or optimization
  * Missing programmatic advertising or dynamic creative optimization
  * No automation platforms (Zapier, Make, HubSpot automation)
  * Purely manual keyword bidding without smart bidding strategies
  * No GenAI tools (ChatGPT, Claude, etc.) for content or strategy
  * No mention of predictive analytics or audience modeling
- Score based on evidence in Work Experience or Projects ONLY

**Parameter 2: Outcome Density/ROI (50% weight)**
- Positive: CAC, LTV, ROAS, Revenue Attribution, Conversion Rate, CPA, CLTV, Growth %, specific quantified metrics
- Negative Indicators to ALWAYS capture (if absent):
  * Vanity metrics only (Reach, Impressions, Likes, Followers)
  * No revenue or business impact mentioned
  * Missing conversion rate optimization focus
  * No customer acquisition cost (CAC) or lifetime value (LTV) tracking
  * Vague descriptions without specific KPIs or results
  * No A/B testing or experimentation mentioned
  * No measurable ROI or cost-per-acquisition data
- Score based on evidence in Work Experience or Projects ONLY

**Experience-Based Rules:**
- Fresher (0-2 years): Score campaign management, social media growth, and personal brand work. Ignore lack of enterprise impact.
- Experienced (3+ years): Penalize missing AI adoption, metrics-driven approach, and quantified business results in recent roles.

**Risk Penalty:** If >50% of CV bullets describe purely manual tasks (manual posting, manual bidding, manual reporting), deduct {penalty} points."""

ROLE_RULES = {
    "data_science": DATA_SCIENCE_RULES,
    "digital_marketing": DIGITAL_MARKETING_RULES,
}

INDICATOR_RULES = """## INDICATOR GENERATION RULES (IMPORTANT)
For BOTH positive and negative indicators:
- Always generate 3-5 indicators per parameter (even if score is low/high)
- Negative indicators should highlight specific GAPS or MISSING SKILLS
- Be specific: instead of "No modern tools", say "No Transformers/LangChain/Vector DB experience"
- If candidate has weakness in a parameter, list what's MISSING vs what they have
- Never leave negativeIndicators empty just because score is high
- Never leave positiveIndicators empty if there's ANY relevant experience"""

OUTPUT_INSTRUCTIONS = """## OUTPUT INSTRUCTIONS
1. Extract years of experience
2. For each parameter, ALWAYS generate both positive and negative indicators
3. Find VALID evidence (Work Experience/Projects only)
4. Calculate parameter scores and weighted scores (weightedScore = weight x score / 100)
5. Compute overall score = sum of weighted scores (minus the risk penalty if applied, never below 0)
6. Provide validation notes and recommendations
7. Output ONLY the JSON object, no markdown, no backticks, no explanations."""


def build_system_prompt(role: str) -> str:
    """Deterministic instruction prompt for the given role key."""
    if role not in ROLE_RULES:
        raise ValueError(f"Unknown role: {role!r}")
    header = (
        f"You are an AI Readiness Evaluator. Analyze CVs for the {ROLE_LABELS[role]} role "
        "and output ONLY valid JSON matching this exact schema. "
        "Do not add markdown, comments, or explanations."
    )
    return "\n\n".join(
        [
            header,
            OUTPUT_SCHEMA_TEMPLATE.format(role=role),
            ROLE_RULES[role].format(penalty=RISK_PENALTY_POINTS),
            INDICATOR_RULES,
            OUTPUT_INSTRUCTIONS,
        ]
    )


def build_user_prompt(cv_text: str) -> str:
    """Wrap CV text in start/end markers for the model."""
    return f"---CV START---\n{cv_text}\n---CV END---\n\nRespond with valid JSON only, no markdown."
