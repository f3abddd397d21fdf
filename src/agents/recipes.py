"""Recipe Catalog - static task templates for quick prompt starts.

Ten recipes, each with a recommended model, matching keywords (English and
Polish, lowercase), follow-up questions and a fill-in-the-blank template.
Square-bracket placeholders are left for the user.

The catalog order is the tie-break order of the matcher.
"""

from typing import Final

from src.schemas.enums import ModelSlug, RecipeSlug
from src.schemas.recipes import Recipe

CODE_REVIEW_TEMPLATE: Final = """<context>
Project: [project name]
Technology: [tech stack]
Code role: [what this fragment does]
</context>

<task>
Perform a code review focusing on:
- [criteria to analyze]
</task>

<code>
[paste code]
</code>

<output_format>
## Summary
[1-2 sentences]

## Critical issues
[list with examples of fixes]

## Optimization suggestions
[list]
</output_format>"""

SYSTEM_PROMPT_TEMPLATE: Final = """## Role
You are [role/persona] specializing in [domain].

## Context
[Background, audience, environment]

## Main tasks
- [Task 1]
- [Task 2]
- [Task 3]

## Communication style
- Tone: [formal/casual/technical]
- Length: [concise/detailed]

## Constraints
- [What not to do]
- [Topics to avoid]"""

IMAGE_GENERATION_TEMPLATE: Final = """[Main subject] in [location].
[Lighting] and [atmosphere].
Style: [style name]."""

RESEARCH_TEMPLATE: Final = """[Research question]

Time range: [e.g. 2024-2025]
Sources: [e.g. peer-reviewed, official documentation]
Format: [table/list/report]

Include different perspectives and cite sources."""

VIDEO_GENERATION_TEMPLATE: Final = """[Subject + motion], [background + motion],
[camera motion: slow pan right / tracking / static],
[style: cinematic / documentary], [atmosphere]"""

PORTRAIT_TEMPLATE: Final = """Professional [shot type] of [person description],
[background], [lighting: natural window lighting / studio],
sharp focus on eyes, [style: corporate / editorial],
[additional details]"""

TRANSLATION_TEMPLATE: Final = """Translate the text below from [source language] to [target language].

Style: [formal/casual/technical]
Context: [where it will be used]

Text:
[text to translate]

Keep the formatting and technical terms."""

SUMMARIZATION_TEMPLATE: Final = """Summarize the text below.

Length: [e.g. 3-5 sentences / 5 bullet points]
Focus: [main conclusions / facts / decisions]
Format: [prose / list / table]

Text:
[text to summarize]"""

DEBUGGING_TEMPLATE: Final = """I have a problem with my code:

Expected behavior:
[what should happen]

Actual behavior:
[what happens]

Error message (if any):
```
[error]
```

Code:
```[language]
[buggy code]
```

What I already tried:
- [attempt 1]
- [attempt 2]

Help diagnose the cause and propose a solution."""

FACT_CHECK_TEMPLATE: Final = """Verify the claim: "[claim]"

Find sources that confirm and contradict it.
Rate credibility based on source quality.
Give a clear verdict: TRUE / FALSE / PARTIALLY TRUE."""


RECIPES: Final[dict[str, Recipe]] = {
    recipe.slug.value: recipe
    for recipe in (
        Recipe(
            slug=RecipeSlug.CODE_REVIEW,
            name="Code review",
            description="Analyze code for bugs, performance and best practices",
            default_model=ModelSlug.CLAUDE,
            alternative_models=(ModelSlug.GPT, ModelSlug.GROK),
            keywords=(
                "code review",
                "review kodu",
                "przejrzyj kod",
                "sprawdz kod",
                "analiza kodu",
                "bug",
                "wydajnosc",
                "refactor",
                "optymalizacja",
                "review code",
                "review this code",
                "review",
                "performance",
            ),
            follow_up_questions=(
                "What programming language is the code in?",
                "What matters most to you? (bugs, performance, readability, security)",
                "Is this production code or a prototype?",
            ),
            template=CODE_REVIEW_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.SYSTEM_PROMPT,
            name="System prompt",
            description="Create a system prompt for a chatbot or AI assistant",
            default_model=ModelSlug.CLAUDE,
            alternative_models=(ModelSlug.GPT,),
            keywords=(
                "system prompt",
                "chatbot",
                "asystent",
                "bot",
                "persona",
                "rola",
                "zachowanie",
                "character",
                "assistant",
                "behavior",
            ),
            follow_up_questions=(
                "What role or persona should the assistant have?",
                "For which company or project?",
                "What tone of communication? (formal/casual/technical)",
                "What are the assistant's main tasks?",
            ),
            template=SYSTEM_PROMPT_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.IMAGE_GENERATION,
            name="Image generation",
            description="Create a prompt for generating an image",
            default_model=ModelSlug.NANO_BANANA,
            alternative_models=(ModelSlug.GROK_AURORA,),
            keywords=(
                "obraz",
                "zdjecie",
                "grafika",
                "ilustracja",
                "image",
                "picture",
                "wygeneruj obraz",
                "stworz grafike",
                "art",
                "illustration",
                "generate an image",
            ),
            follow_up_questions=(
                "What should the image show?",
                "What style? (photorealism, anime, watercolor, etc.)",
                "What lighting or time of day?",
                "What mood or atmosphere?",
            ),
            template=IMAGE_GENERATION_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.RESEARCH,
            name="Research / Analysis",
            description="Research a topic across many sources with verification",
            default_model=ModelSlug.PERPLEXITY,
            alternative_models=(ModelSlug.CLAUDE,),
            keywords=(
                "research",
                "badanie",
                "analiza rynku",
                "raport",
                "deep research",
                "zrodla",
                "publikacje",
                "academic",
                "sprawdz",
                "znajdz informacje",
                "market analysis",
                "report",
                "sources",
                "publications",
                "find information",
            ),
            follow_up_questions=(
                "What topic should be researched?",
                "What time range? (e.g. 2024-2025)",
                "What types of sources do you prefer? (academic, industry, official)",
                "What report format?",
            ),
            template=RESEARCH_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.VIDEO_GENERATION,
            name="Video generation",
            description="Create a prompt for generating short video clips",
            default_model=ModelSlug.GROK_IMAGINE,
            keywords=(
                "wideo",
                "video",
                "animacja",
                "clip",
                "film",
                "ruch",
                "motion",
                "animation",
            ),
            follow_up_questions=(
                "What should the video show?",
                "How does the subject move?",
                "What camera motion? (static, pan, tracking)",
                "What mood or style?",
            ),
            template=VIDEO_GENERATION_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.PORTRAIT,
            name="Portrait / Profile photo",
            description="Create a photorealistic portrait or profile photo",
            default_model=ModelSlug.GROK_AURORA,
            alternative_models=(ModelSlug.NANO_BANANA,),
            keywords=(
                "portret",
                "portrait",
                "headshot",
                "zdjecie profilowe",
                "twarz",
                "osoba",
                "fotografia portretowa",
                "profile photo",
                "profile picture",
                "face",
            ),
            follow_up_questions=(
                "Who should the portrait show?",
                "What kind of shot? (headshot, waist-up, full body)",
                "What style? (professional, artistic, casual)",
                "What background or location?",
            ),
            template=PORTRAIT_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.TRANSLATION,
            name="Translation",
            description="Translate text while keeping its style and context",
            default_model=ModelSlug.GPT,
            alternative_models=(ModelSlug.CLAUDE, ModelSlug.GEMINI),
            keywords=(
                "tlumaczenie",
                "przetlumacz",
                "translate",
                "translation",
                "z polskiego",
                "na polski",
                "z angielskiego",
                "into english",
                "from english",
            ),
            follow_up_questions=(
                "From which language into which?",
                "What style? (formal/casual/technical)",
                "Where will the text be used? (website, document, UI)",
            ),
            template=TRANSLATION_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.SUMMARIZATION,
            name="Summary",
            description="Summarize a text or document",
            default_model=ModelSlug.CLAUDE,
            alternative_models=(ModelSlug.GPT, ModelSlug.GEMINI),
            keywords=(
                "podsumowanie",
                "streszczenie",
                "summarize",
                "summary",
                "skrot",
                "w skrocie",
                "tldr",
                "in short",
            ),
            follow_up_questions=(
                "How long should the summary be? (sentences/bullets/paragraphs)",
                "What should it focus on? (conclusions/facts/decisions)",
                "Who is the summary for?",
            ),
            template=SUMMARIZATION_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.DEBUGGING,
            name="Debugging",
            description="Find and fix a bug in code",
            default_model=ModelSlug.CLAUDE,
            alternative_models=(ModelSlug.GPT, ModelSlug.GROK),
            keywords=(
                "debug",
                "debugowanie",
                "bug",
                "blad",
                "error",
                "nie dziala",
                "problem z kodem",
                "napraw",
                "fix",
                "debugging",
                "not working",
                "broken",
            ),
            follow_up_questions=(
                "What is the expected behavior?",
                "What happens instead?",
                "What is the error message (if any)?",
                "What have you already tried?",
            ),
            template=DEBUGGING_TEMPLATE,
        ),
        Recipe(
            slug=RecipeSlug.FACT_CHECK,
            name="Fact check",
            description="Check whether a claim is true",
            default_model=ModelSlug.PERPLEXITY,
            keywords=(
                "sprawdz",
                "zweryfikuj",
                "fact check",
                "czy to prawda",
                "potwierdz",
                "prawdziwosc",
                "fact-check",
                "verify",
                "is it true",
                "confirm",
            ),
            follow_up_questions=(
                "Which claim do you want to verify?",
                "What sources do you prefer? (academic, official)",
            ),
            template=FACT_CHECK_TEMPLATE,
        ),
    )
}
