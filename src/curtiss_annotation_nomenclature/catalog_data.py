# curtiss-annotation-nomenclature - Reference catalog of reading annotation codes
# Copyright (C) 2026 Michael Doyle
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing available. See COMMERCIAL-LICENSE.md for details.

"""Static catalog rows and descriptive constants.

This module is data only. Every structure a caller sees is derived from
ANNOTATION_ENTRIES and EMPHASIZER_ENTRIES by catalog_indexer.build_index.

Row invariants (checked by tests/test_catalog_data.py):
- codes are unique within a catalog, and the two catalogs share no code
- names are unique within a catalog
- code, name and description are non-empty and carry no surrounding whitespace
"""

from curtiss_annotation_nomenclature.models import Disclaimer, EmphasizerGuidance, Entry

VERSION = "1.0.0"

ANNOTATION_ENTRIES: tuple[Entry, ...] = (
    Entry(
        code="!",
        name="Surprising",
        description="Surprising or unexpected",
    ),
    Entry(
        code="?",
        name="Question",
        description="Question validity or accuracy (doubt correctness, not comprehension - use CF if confused)",
    ),
    Entry(
        code="A",
        name="Analogy",
        description="Noteworthy (i.e. good, bad, peculiar etc.) analogy",
    ),
    Entry(
        code="AG",
        name="Agree",
        description="Agree with this",
    ),
    Entry(
        code="AL",
        name="Allegory",
        description="Allegory - entire story has symbolic deeper meaning",
    ),
    Entry(
        code="AO",
        name="Abolition",
        description="Abolition - abolitionist thinking, dismantling oppressive systems",
    ),
    Entry(
        code="AP",
        name="Application",
        description="Application - how to apply concept in practice (includes pastoral application)",
    ),
    Entry(
        code="AR",
        name="ArgumentStructure",
        description="Argument structure or logical progression - how argument is built (not the claim itself - use C for that)",
    ),
    Entry(
        code="AS",
        name="Assumption",
        description="Assumption - stated or unstated, foundational or questionable (includes premises, limitations, caveats)",
    ),
    Entry(
        code="AT",
        name="ActionTask",
        description="Action/Task/To Do - something you want to remember to do or implement",
    ),
    Entry(
        code="AU",
        name="Allusion",
        description="Allusion - indirect reference to other works or events",
    ),
    Entry(
        code="B",
        name="Breakthrough",
        description="Breakthrough - author's major insight or discovery (not yours - use IN for that)",
    ),
    Entry(
        code="BG",
        name="BackgroundContext",
        description="Background context - historical, cultural, technical, geographical (includes community, diaspora themes)",
    ),
    Entry(
        code="BV",
        name="Behavior",
        description="Behavior - behavioral patterns, behavioral economics, habits, actions (psychology, economics, sociology)",
    ),
    Entry(
        code="C",
        name="Claim",
        description="Claim or argument being made",
    ),
    Entry(
        code="CA",
        name="Counterargument",
        description="Counterargument - addresses opposing views (includes dissents, alternative positions)",
    ),
    Entry(
        code="CB",
        name="Callback",
        description="Callback - references earlier moment in text",
    ),
    Entry(
        code="CE",
        name="CauseEffect",
        description="Cause and effect relationship",
    ),
    Entry(
        code="CF",
        name="Confusing",
        description="Confusing or unclear (comprehension issue, not doubt - use ? if questioning accuracy)",
    ),
    Entry(
        code="CH",
        name="CharacterInsight",
        description="Character insight or development (works for biographical subjects, note 'first appearance' for introductions)",
    ),
    Entry(
        code="CN",
        name="Conclusion",
        description="Conclusion - main takeaway or final conclusion",
    ),
    Entry(
        code="CO",
        name="Connect",
        description="Connect to another book, current events, or personal experience",
    ),
    Entry(
        code="CR",
        name="CrossReference",
        description="Cross-reference - author explicitly cites another passage, book, or verse (includes source quality notes)",
    ),
    Entry(
        code="CT",
        name="Critique",
        description="Critique - author critiques another idea, philosopher, or theory",
    ),
    Entry(
        code="CX",
        name="ContextCrucial",
        description="Context crucial - requires cultural or historical background to understand",
    ),
    Entry(
        code="D",
        name="Definition",
        description="Definition - term explicitly defined",
    ),
    Entry(
        code="DI",
        name="Dialogue",
        description="Dialogue - particularly noteworthy (i.e. good, bad, peculiar etc.) character speech",
    ),
    Entry(
        code="DK",
        name="Dark",
        description="Dark, distressing - depressing, sad, bleak, traumatic, grief (all heavy negative affect)",
    ),
    Entry(
        code="DL",
        name="Dialectic",
        description="Dialectic - dialectical method, Socratic questioning, thesis-antithesis-synthesis",
    ),
    Entry(
        code="DO",
        name="Doctrine",
        description="Doctrine - doctrinal position (includes ecclesiology, eschatology)",
    ),
    Entry(
        code="DT",
        name="DateTimeline",
        description="Date or timeline marker - important chronological information",
    ),
    Entry(
        code="E",
        name="Evidence",
        description="Evidence or data - supports argument (includes statistics, qualitative evidence, all data types)",
    ),
    Entry(
        code="ER",
        name="Erasure",
        description="Erasure or silence - historical erasure, archival silence, what's missing",
    ),
    Entry(
        code="ET",
        name="EthicalTeaching",
        description="Ethical teaching - moral instruction (works in philosophy)",
    ),
    Entry(
        code="EX",
        name="Example",
        description="Example or illustration - clarifying example (pedagogical purpose)",
    ),
    Entry(
        code="FH",
        name="Foreshadowing",
        description="Foreshadowing - hints at future events (works in narrative nonfiction)",
    ),
    Entry(
        code="FL",
        name="FlawInReasoning",
        description="Flaw in reasoning - logical fallacy, methodology error, code bug (includes contradictions, inconsistencies)",
    ),
    Entry(
        code="FN",
        name="Footnote",
        description="Footnote or note - important footnote, endnote, or marginal note",
    ),
    Entry(
        code="FO",
        name="FormulaEquation",
        description="Formula or equation - important to know (financial, scientific, mathematical)",
    ),
    Entry(
        code="FR",
        name="FramingArgument",
        description="Framing argument - sets up later argument",
    ),
    Entry(
        code="H",
        name="Humorous",
        description="Humorous or funny",
    ),
    Entry(
        code="HF",
        name="HistoricalFact",
        description="Historical fact - factual event or date",
    ),
    Entry(
        code="HG",
        name="Hegemony",
        description="Hegemony - dominant ideology or power structure (white supremacy, patriarchy, heteronormativity, etc.)",
    ),
    Entry(
        code="HY",
        name="Hyperbole",
        description="Hyperbole or exaggeration",
    ),
    Entry(
        code="I",
        name="Ironic",
        description="Ironic",
    ),
    Entry(
        code="IN",
        name="Insight",
        description="Insight - your personal realization (not author's discovery - use B for that)",
    ),
    Entry(
        code="IS",
        name="Institution",
        description="Institution or structure - institutional racism, structures (includes coloniality, surveillance)",
    ),
    Entry(
        code="IX",
        name="Intersectionality",
        description="Intersectionality - race, gender, class, sexuality intersection (includes embodiment themes)",
    ),
    Entry(
        code="J",
        name="Beautiful",
        description="Beautiful or moving",
    ),
    Entry(
        code="JX",
        name="Juxtaposition",
        description="Juxtaposition or contrast - comparing opposites (works for theoretical comparisons)",
    ),
    Entry(
        code="JY",
        name="Joy",
        description="Joy or pleasure - joy, pleasure, life-making (works across contexts)",
    ),
    Entry(
        code="KC",
        name="KeyConcept",
        description="Key concept - central important concept (use for major policies, frameworks)",
    ),
    Entry(
        code="LG",
        name="LawLegal",
        description="Law or legal - legal structures, legislation, case law, treaties (includes international agreements)",
    ),
    Entry(
        code="LN",
        name="Language",
        description="Language - any language word or grammar note (Greek, Hebrew, French, Spanish, Arabic, etc.)",
    ),
    Entry(
        code="M",
        name="Metaphor",
        description="Metaphor - noteworthy (i.e. good, bad, peculiar etc.) metaphor or direct comparison",
    ),
    Entry(
        code="MI",
        name="MassiveImplications",
        description="Massive implications - far-reaching consequences or importance",
    ),
    Entry(
        code="MO",
        name="ModelFramework",
        description="Model or framework - theoretical model, diagram, organizational framework (business, scientific, conceptual)",
    ),
    Entry(
        code="NL",
        name="Neologism",
        description="Neologism - invented term, creative wordplay, or technical redefinition",
    ),
    Entry(
        code="NT",
        name="CounterNarrative",
        description="Counter-narrative - challenges dominant narrative",
    ),
    Entry(
        code="OP",
        name="Oppression",
        description="Oppression - theorization of oppression (anti-Blackness, sexism, ableism, homophobia, etc.)",
    ),
    Entry(
        code="PA",
        name="Pattern",
        description="Pattern - recurring theme, design pattern, or motif",
    ),
    Entry(
        code="PF",
        name="ProofDerivation",
        description="Proof or derivation - mathematical or logical proof step",
    ),
    Entry(
        code="PP",
        name="Perspective",
        description="Perspective or point of view - whose narrative or viewpoint (includes standpoint epistemology)",
    ),
    Entry(
        code="PR",
        name="Principle",
        description="Principle - foundational rule or teaching (actionable, works across disciplines)",
    ),
    Entry(
        code="PX",
        name="Paradox",
        description="Paradox or mystery - contradictory statement revealing truth (logical paradox or theological mystery)",
    ),
    Entry(
        code="Q",
        name="QuoteWorthy",
        description="Quotable - a noteworthy (i.e. good, bad, peculiar etc.) phrase that you would use (with or without some variation) in your own writing, everyday life, or just want to remember this",
    ),
    Entry(
        code="R",
        name="Research",
        description="Research, review, or link - return to this for any reason (note: external research, reread, or topic link)",
    ),
    Entry(
        code="RA",
        name="Resistance",
        description="Resistance or agency - acts of resistance, refusal, fugitivity, escape",
    ),
    Entry(
        code="RG",
        name="Rage",
        description="Rage or anger - righteous anger, political anger (works in memoir, biography)",
    ),
    Entry(
        code="RH",
        name="RhetoricalDevice",
        description="Rhetorical device - effective persuasion technique (catch-all for devices without specific codes)",
    ),
    Entry(
        code="RK",
        name="Risk",
        description="Risk - risk analysis, risk/reward, risk management (finance, business, psychology, medicine)",
    ),
    Entry(
        code="RV",
        name="Recovery",
        description="Recovery - historical recovery or reclamation",
    ),
    Entry(
        code="S",
        name="Setting",
        description="Setting or environment building - physical or atmospheric (historical setting in nonfiction)",
    ),
    Entry(
        code="SB",
        name="Sidebar",
        description="Sidebar or box - key information in sidebar, callout, or boxed text",
    ),
    Entry(
        code="SC",
        name="SchoolOfThought",
        description="School of thought - philosophical tradition, political ideology (Stoic, Marxist, etc.)",
    ),
    Entry(
        code="SO",
        name="SourceCodeExample",
        description="Source code example - particularly noteworthy (i.e. good, bad, peculiar etc.) implementation",
    ),
    Entry(
        code="SP",
        name="Speculation",
        description="Speculation or imagination - what-if, critical fabulation, radical imagination, alternative futures",
    ),
    Entry(
        code="SS",
        name="SoundStyle",
        description="Sound or style technique - alliteration, rhythm, sentence structure (includes epic conventions)",
    ),
    Entry(
        code="ST",
        name="Story",
        description="Story - retellable narrative (includes personal anecdotes, parables, case studies, illustrations)",
    ),
    Entry(
        code="SU",
        name="SummarySynthesis",
        description="Summary or synthesis - author compresses complex idea",
    ),
    Entry(
        code="SY",
        name="Symbolic",
        description="Symbolic or figurative - non-literal interpretation (includes typology, allegory interpretation)",
    ),
    Entry(
        code="T",
        name="Thematic",
        description="Thematic statement - central theme or thematic claim",
    ),
    Entry(
        code="TC",
        name="TechnologyConcept",
        description="Technology or concept - interesting tech or scientific idea (even if not central)",
    ),
    Entry(
        code="TE",
        name="TechnicalExplanation",
        description="Technical explanation - algorithm, architecture, process, philosophical system (broadly technical)",
    ),
    Entry(
        code="TH",
        name="ThoughtExperiment",
        description="Thought experiment - philosophical hypothetical or gedankenexperiment",
    ),
    Entry(
        code="TM",
        name="Terminology",
        description="Terminology - specific technical term used (not necessarily defined - use D for definitions)",
    ),
    Entry(
        code="TP",
        name="TurningPoint",
        description="Turning point or pivotal moment (works for arguments and narratives, note 'evolution' for gradual shifts)",
    ),
    Entry(
        code="TS",
        name="TestStudyMaterial",
        description="Test or study material - likely exam material, must know",
    ),
    Entry(
        code="TV",
        name="TextVariant",
        description="Text variant - different manuscript readings",
    ),
    Entry(
        code="TX",
        name="TranslationIssue",
        description="Translation issue - English obscures original meaning",
    ),
    Entry(
        code="V",
        name="VerseReference",
        description="Verse reference - important scripture citation",
    ),
    Entry(
        code="VI",
        name="VividImagery",
        description="Vivid imagery - striking visual description (any subject, not just settings)",
    ),
    Entry(
        code="VL",
        name="Violence",
        description="Violence - structural violence or state violence (works in political science, history)",
    ),
    Entry(
        code="VZ",
        name="Visual",
        description="Visual - important diagram, chart, graph, table, or image",
    ),
    Entry(
        code="W",
        name="LovedWording",
        description="Loved the wording - excellent word choice or phrasing",
    ),
    Entry(
        code="WB",
        name="WorldBuilding",
        description="WorldBuilding - creating unique fictional universe rules",
    ),
    Entry(
        code="WS",
        name="WordStudy",
        description="Word study - etymology, semantic range, nuance",
    ),
    Entry(
        code="WT",
        name="WitnessingTestimony",
        description="Witnessing or testimony - first-person accounts with evidentiary weight",
    ),
    Entry(
        code="WV",
        name="WorldviewRevealed",
        description="Worldview revealed - author's fundamental beliefs showing through",
    ),
    Entry(
        code="X",
        name="Disagree",
        description="Disagree with this",
    ),
)

EMPHASIZER_ENTRIES: tuple[Entry, ...] = (
    Entry(code="+", name="StrongLike", description="I really like this"),
    Entry(code="-", name="StrongDislike", description="I really don't like this"),
    Entry(code="*", name="Critical", description="This is really important"),
)

DISCLAIMER = Disclaimer(
    full=(
        "These annotations are for indicating 'noteworthy' content, not necessarily "
        "good or bad or likeable content. Sometimes the desire is to note something "
        "because it's weird or otherwise important to remember."
    ),
    short="Noteworthy, not necessarily good or bad",
)

# Only ONE emphasizer per annotation: "(KC)*+" or "(KC)-*" are invalid.
# Nothing in this package enforces that; it is guidance for applications.
EMPHASIZER_GUIDANCE = EmphasizerGuidance(
    purpose=(
        "CAN Emphasizers are entirely optional, but exist primarily because CAN Codes "
        "are often meant to communicate something only noteworthy. This means there is "
        "a gap that can be solved by adding a CAN Emphasizer to eliminate the necessity "
        "for verbose comments."
    ),
    recommendation=(
        "The primary recommendation is that you only use one CAN Emphasizer per CAN Code. "
        "You may change it later if needed."
    ),
    note=(
        "CAN Emphasizers should be used sparingly - only when you really want to "
        "emphasize something. Use them to communicate a 'strong' dislike, 'strong' like, "
        "or 'strong' belief that something is important."
    ),
)
