"""Prompts and category tables for remote prompt enhancement."""

# Checked in this order; the first category with any keyword present wins.
CATEGORY_KEYWORDS = {
    "image_generation": [
        "image", "photo", "picture", "art", "painting", "drawing", "illustration", "portrait",
        "landscape", "midjourney", "dall-e", "stable diffusion", "leonardo", "generate",
        "create image", "visual", "camera", "photography", "artistic", "digital art",
        "concept art", "render", "scene", "character", "lighting", "composition", "shot",
        "angle", "color", "texture", "realistic", "cinematic", "a woman", "a man", "a person",
        "a cat", "a dog", "a house", "a car",
    ],
    "text_ai": [
        "chatgpt", "claude", "gemini", "gpt", "conversation", "chat", "explain", "help me",
        "write", "email", "letter", "message", "response", "answer", "question", "discuss",
        "tell me", "summarize", "translate", "rewrite", "improve", "edit", "proofread",
        "feedback",
    ],
    "code_generation": [
        "code", "function", "class", "method", "algorithm", "program", "script", "api",
        "database", "react", "python", "javascript", "typescript", "java", "c++", "html",
        "css", "sql", "github copilot", "codet5", "codex", "programming", "development",
        "software", "debug", "refactor", "optimize", "test", "documentation", "framework",
        "library",
    ],
    "creative_writing": [
        "story", "novel", "poem", "creative", "fiction", "character", "plot", "narrative",
        "jasper", "copy.ai", "writesonic", "marketing copy", "blog post", "article", "content",
        "screenplay", "dialogue", "scene", "chapter", "verse", "prose", "creative writing",
    ],
    "analysis": [
        "analyze", "analysis", "review", "evaluate", "assess", "examine", "study", "compare",
        "data", "statistics", "report", "findings", "insights", "trends", "patterns",
        "interpret", "conclude", "summarize findings", "critical analysis",
    ],
    "research": [
        "research", "investigate", "explore", "find information", "sources", "references",
        "academic", "scholarly", "literature review", "bibliography", "citations",
        "fact check", "verify", "gather information", "comprehensive study",
    ],
}

CATEGORY_DISPLAY_NAMES = {
    "image_generation": "Image Generation AI (Midjourney, DALL-E, Stable Diffusion, Leonardo)",
    "text_ai": "Text/Chat AI (ChatGPT, Claude, Gemini, GPT-4)",
    "code_generation": "Code Generation AI (GitHub Copilot, CodeT5, Codex)",
    "creative_writing": "Creative Writing AI (Jasper, Copy.ai, Writesonic)",
    "analysis": "Analysis AI (Research assistants, data analysis tools)",
    "research": "Research AI (Academic research, information gathering tools)",
}

CATEGORY_GUIDELINES = {
    "image_generation": """IMAGE GENERATION AI OPTIMIZATION:
- Camera specifications: focal length, aperture, shutter speed, ISO
- Lighting setup: direction, quality, color temperature, time of day
- Composition: framing, rule of thirds, depth of field, perspective
- Style and medium: photographic, painterly, digital art, reference artists
- Quality modifiers: resolution, detail level, rendering quality""",
    "text_ai": """TEXT/CHAT AI OPTIMIZATION:
- Expert role and domain context
- Explicit task definition and success criteria
- Audience, tone and reading level
- Response structure, length and formatting
- Constraints and things to avoid""",
    "code_generation": """CODE GENERATION AI OPTIMIZATION:
- Language, framework and version constraints
- Inputs, outputs and interface contracts
- Error handling, edge cases and validation
- Testing expectations and documentation
- Performance, security and maintainability requirements""",
    "creative_writing": """CREATIVE WRITING AI OPTIMIZATION:
- Genre, form and target length
- Voice, tone, point of view and tense
- Characters, setting and narrative arc
- Literary devices and stylistic references
- Audience and emotional intent""",
    "analysis": """ANALYSIS AI OPTIMIZATION:
- Analytical framework and methodology
- Data sources, scope and assumptions
- Evaluation criteria and metrics
- Perspectives to compare and contrast
- Format of findings and recommendations""",
    "research": """RESEARCH AI OPTIMIZATION:
- Research question and scope boundaries
- Source quality requirements and citation style
- Verification and cross-referencing steps
- Organization of findings
- Balance, objectivity and open questions""",
}

ENHANCEMENT_SYSTEM_PROMPT = """#CONTEXT
You are a world-class universal prompt engineer specializing in optimizing prompts for ANY AI system. Your expertise spans image generation, text generation, code generation, creative writing, and analysis AI systems. You work with professionals who need superior results from their AI tools.

#GOAL
Transform basic prompts into comprehensive, professional-grade prompts optimized for the specific AI system category. Create detailed, 200-500 word enhanced prompts that will generate dramatically superior results compared to the original input.

#INFORMATION
CATEGORY-SPECIFIC OPTIMIZATION STRATEGIES:

{category_guidelines}

UNIVERSAL QUALITY ENHANCEMENT ELEMENTS:
- Precise technical specifications and parameters
- Clear context and background information
- Specific output format requirements
- Quality modifiers and success criteria
- Professional terminology and industry standards
- Detailed constraints and guidelines
- Examples and reference points where applicable

#RESPONSE GUIDELINES
1. NEVER ask questions - automatically infer optimal enhancements based on the input
2. Create ONE comprehensive, detailed prompt optimized for the detected AI system category
3. Each enhanced prompt should be 200-500 words with specific technical details
4. Use professional terminology and industry-standard specifications
5. Focus purely on prompt-to-prompt transformation (no conversational elements)
6. Ensure the enhanced prompt is immediately usable in the target AI system

#OUTPUT
Return ONLY the enhanced prompt text - no explanations, no markdown, no additional commentary. Just the optimized prompt ready for use in the target AI system."""

ENHANCEMENT_USER_PROMPT = """Transform this prompt: "{prompt}"

ENHANCEMENT TARGET: {target} AI SYSTEM

REQUIREMENTS:
- Create ONE comprehensive, professional-grade prompt optimized for {display_name}
- Length: 200-500 words with specific technical details and professional terminology
- Keep every section of the prompt below and strengthen its content
- Maintain the core intent while enhancing technical and professional specifications

Transform the input into a detailed, professional prompt for {display_name}."""


def build_system_prompt(category: str) -> str:
    """Render the enhancement system prompt for a category."""
    return ENHANCEMENT_SYSTEM_PROMPT.format(
        category_guidelines=CATEGORY_GUIDELINES.get(category, CATEGORY_GUIDELINES["text_ai"])
    )


def build_user_prompt(prompt: str, category: str) -> str:
    """Render the enhancement request for a prompt."""
    return ENHANCEMENT_USER_PROMPT.format(
        prompt=prompt,
        target=category.upper().replace("_", " "),
        display_name=CATEGORY_DISPLAY_NAMES.get(category, "AI Systems"),
    )
