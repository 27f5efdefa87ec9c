"""Prompt templates for SHRED eligibility analysis.

Three research-grounded variants share one skeleton:

    role framing
    research heading + research blob
    task to analyse
    company context            (omitted entirely when blank)
    instructions + required output format

``basic`` asks for a quick YES/NO answer, ``comprehensive`` asks for a full
professional report with a per-activity task breakdown, and ``critical``
spells out exclusions and qualifying activities and asks for a
component-by-component evaluation.

``compose_standalone`` builds the research-free prompt used when the model
is expected to recall the program definition on its own.

Everything here is pure string assembly: the same inputs always produce the
same bytes.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class PromptVariant(str, Enum):
    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"
    CRITICAL = "critical"


# ── Role framing ───────────────────────────────────────────────────────────────

_ROLE_SENIOR = (
    "You are a senior tax expert specializing in Canadian SHRED "
    "(Scientific Research and Experimental Development) tax credits."
)

_ROLE_COMPREHENSIVE = (
    "You are a senior tax expert specializing in Canadian tax credits, "
    "particularly the SHRED (Scientific Research and Experimental Development) "
    "program. You have access to current SHRED requirements and need to analyze "
    "a specific task for eligibility."
)

_ROLE_STANDALONE = (
    "You are a tax expert specializing in Canadian tax credits. Please analyze "
    "the following task description to determine if it qualifies for the Canadian "
    "SHRED (Scientific Research and Experimental Development) tax credit program."
)

# ── Instructions + output format ───────────────────────────────────────────────

_BODY_BASIC = """\
**ANALYSIS INSTRUCTIONS:**
1. Review the SHRED requirements above
2. Analyze the task against SHRED criteria:
   - Scientific/Technological Advancement
   - Systematic Investigation
   - Technical Uncertainty Resolution
   - Experimental Development

**REQUIRED OUTPUT FORMAT:**

## SHRED Eligibility Analysis

### Quick Answer
**Eligible:** [YES/NO]
**Confidence:** [High/Medium/Low]

### Reasoning
[2-3 sentences explaining why the task does/doesn't qualify for SHRED]

### Key Criteria Met
- [List specific SHRED criteria the task meets, or "None" if not eligible]

### Recommendations
- [If eligible: What documentation is needed]
- [If not eligible: What changes would make it eligible]

Please provide a clear, concise analysis suitable for quick decision-making."""

_BODY_COMPREHENSIVE = """\
**ANALYSIS INSTRUCTIONS:**

1. **SHRED Program Understanding:**
   - Review the current SHRED requirements from the research above
   - Identify the key eligibility criteria and qualifying activities
   - Note any recent changes or updates to the program

2. **Task Analysis Framework:**
   Analyze the task against these SHRED criteria:
   - **Scientific or Technological Advancement**: Does the task seek to advance scientific or technological knowledge?
   - **Systematic Investigation**: Is there a systematic approach to resolving technical uncertainty?
   - **Technical Uncertainty**: Does the task involve resolving technical problems where the solution is not readily apparent?
   - **Experimental Development**: Does the task involve experimental work to achieve technological advancement?

3. **Detailed Assessment:**
   - Break down the task into its component activities
   - Evaluate each component against SHRED criteria
   - Consider the company context and industry standards
   - Assess the level of technical uncertainty involved

4. **Professional Determination:**
   - Provide a clear YES/NO eligibility determination
   - Support your conclusion with specific reasoning
   - Reference relevant SHRED criteria and requirements
   - Consider potential challenges or limitations

**REQUIRED OUTPUT FORMAT:**

## SHRED Eligibility Analysis Report

### Executive Summary
- **Task:** [Brief description]
- **Eligibility Determination:** [YES/NO]
- **Confidence Level:** [High/Medium/Low]
- **Key Reasoning:** [2-3 sentence summary]

### Detailed Analysis

#### 1. SHRED Criteria Assessment
- **Scientific/Technological Advancement:** [Analysis and reasoning]
- **Systematic Investigation:** [Analysis and reasoning]
- **Technical Uncertainty:** [Analysis and reasoning]
- **Experimental Development:** [Analysis and reasoning]

#### 2. Task Breakdown
- **Primary Activities:** [List and analyze each major activity]
- **Technical Challenges:** [Identify specific technical problems being solved]
- **Innovation Level:** [Assess the degree of innovation and advancement]

#### 3. Eligibility Determination
- **Overall Assessment:** [Comprehensive reasoning for the determination]
- **Supporting Evidence:** [Specific examples from the task that support the determination]
- **Potential Concerns:** [Any aspects that might challenge eligibility]

#### 4. Recommendations
- **If Eligible:** [Specific documentation and evidence needed to support the claim]
- **If Not Eligible:** [Specific changes or modifications needed to qualify]
- **Next Steps:** [Recommended actions for the company]

#### 5. Documentation Requirements
- **Required Documentation:** [List of documents needed to support the SHRED claim]
- **Evidence Collection:** [Specific evidence that should be gathered]
- **Record Keeping:** [Recommended record-keeping practices]

### Professional Notes
- **Risk Assessment:** [Potential risks or challenges with this determination]
- **Alternative Approaches:** [Other ways the task might be structured to qualify]
- **Industry Context:** [How similar activities are typically handled in the industry]

Please provide a thorough, professional analysis suitable for tax planning and compliance purposes. Your analysis should be detailed enough to support decision-making and documentation requirements."""

_BODY_CRITICAL = """\
**CRITICAL ANALYSIS INSTRUCTIONS:**

⚠️ **IMPORTANT EXCLUSIONS - These activities DO NOT qualify for SHRED:**
- Standard software development lifecycle (SDLC) tasks
- Routine deployment, setup, configuration, or maintenance
- Standard testing, monitoring, or operational tasks
- Following established procedures or best practices
- Planning phases for standard development work
- Production deployments using existing technologies
- Routine database operations or standard architecture work

✅ **SHRED REQUIRES ALL THREE CRITERIA:**
1. **Scientific/Technological Advancement**: Must advance scientific or technological knowledge beyond current state-of-the-art
2. **Systematic Investigation**: Must involve systematic approach to resolve technical uncertainty
3. **Technical Uncertainty**: Must involve technical problems where the solution is not readily apparent or available

🎯 **POTENTIAL SHRED ACTIVITIES - These MAY qualify if they meet the three criteria:**
- Performance optimization research with technical uncertainty
- Throughput testing to resolve novel technical challenges
- Investigation of new approaches to solve technical problems
- Research into emerging technologies or methodologies
- Experimental development of new solutions
- Systematic investigation of technical unknowns

**ANALYSIS FRAMEWORK:**
1. **BREAK DOWN THE TASK**: Split the task description into individual components/activities
2. **Evaluate each component separately**:
   - Check exclusions for each part
   - Look for potential SHRED indicators in each part
   - Evaluate SHRED criteria for each part individually
   - Assess innovation level for each part
3. **Provide component-by-component analysis**: List each activity and its eligibility
4. **Overall determination**: Based on the component analysis
5. **When in doubt, ask clarifying questions**: If any component is ambiguous, request more details

**REQUIRED OUTPUT FORMAT:**

## SHRED Eligibility Analysis

### Task Breakdown
**Component Analysis:** [Break down the task into individual activities and evaluate each separately]

### Component-by-Component Evaluation
1. **[Activity 1]**: [Eligible/Not Eligible] - [Brief reasoning]
2. **[Activity 2]**: [Eligible/Not Eligible] - [Brief reasoning]
3. **[Activity 3]**: [Eligible/Not Eligible] - [Brief reasoning]
[Continue for each component...]

### Overall Assessment
**Overall Eligible:** [YES/NO/PARTIAL]
**Confidence:** [High/Medium/Low]

### Reasoning
[2-3 sentences explaining the overall determination based on component analysis]

### Eligible Components
- [List only the components that qualify for SHRED]

### Non-Eligible Components
- [List components that don't qualify and why]

### Follow-up Questions Needed
**ALWAYS provide follow-up questions when:**
- Confidence is Medium or Low
- Any component involves testing, research, investigation, or performance work
- Component descriptions are ambiguous about technical uncertainty
- You cannot definitively determine eligibility for any component

**List 2-3 specific questions that would help clarify eligibility. Focus on:**
- Technical uncertainty being resolved in specific components
- Innovation level and advancement beyond current state-of-the-art
- Systematic investigation methods being used
- Novel approaches or experimental development

### Recommendations
- [If eligible: What documentation is needed for eligible components]
- [If partial: How to separate eligible from non-eligible work]
- [If not eligible: What changes would make components eligible]

Please provide a thorough component-by-component analysis that emphasizes the innovation and advancement requirements of SHRED."""

_BODY_STANDALONE = """\
**Instructions:**
1. First, research and provide the current definition and requirements of the Canadian SHRED tax credit program
2. Analyze the task description against SHRED criteria including:
   - Scientific or technological advancement
   - Systematic investigation
   - Technical uncertainty resolution
   - Experimental development activities
3. Determine if the task fits within SHRED parameters
4. Provide detailed reasoning for your conclusion
5. If eligible, explain which specific SHRED criteria the task meets
6. If not eligible, explain what would be needed to qualify

**Required Output Format:**
- **SHRED Definition:** [Current program definition and requirements]
- **Task Analysis:** [Detailed analysis of the specific task]
- **Eligibility Determination:** [YES/NO with clear reasoning]
- **Reasoning:** [Detailed explanation of why the task does/doesn't qualify]
- **Recommendations:** [If not eligible, what changes would make it eligible]

Please provide a thorough, professional analysis suitable for tax planning purposes."""

#: variant → (role, research heading, body)
_TEMPLATES: dict[PromptVariant, tuple[str, str, str]] = {
    PromptVariant.BASIC: (
        _ROLE_SENIOR, "**CURRENT SHRED REQUIREMENTS:**", _BODY_BASIC,
    ),
    PromptVariant.COMPREHENSIVE: (
        _ROLE_COMPREHENSIVE, "**CURRENT SHRED REQUIREMENTS RESEARCH:**", _BODY_COMPREHENSIVE,
    ),
    PromptVariant.CRITICAL: (
        _ROLE_SENIOR, "**CURRENT SHRED REQUIREMENTS:**", _BODY_CRITICAL,
    ),
}


def compose(
    variant: Union[PromptVariant, str],
    task_description: str,
    company_context: str,
    research_blob: str,
) -> str:
    """Build the analysis prompt for *variant*.

    Args:
        variant: ``basic``, ``comprehensive`` or ``critical``.
        task_description: The task being assessed.
        company_context: Optional company/industry context. Blank values drop
            the context section entirely.
        research_blob: Text from ``RequirementsResearcher``.

    Returns:
        The full prompt text.

    Raises:
        ValueError: If *variant* is not a known prompt variant.
    """
    role, research_heading, body = _TEMPLATES[PromptVariant(variant)]
    sections = [
        role,
        f"{research_heading}\n{research_blob}",
        f'**TASK TO ANALYZE:**\n"{task_description}"',
    ]
    if company_context and company_context.strip():
        sections.append(f"**COMPANY CONTEXT:** {company_context}")
    sections.append(body)
    return "\n\n".join(sections)


def compose_standalone(task_description: str, company_context: str = "") -> str:
    """Build the research-free prompt: the model supplies the program definition."""
    sections = [
        _ROLE_STANDALONE,
        f'**Task to Analyze:**\n"{task_description}"',
    ]
    if company_context and company_context.strip():
        sections.append(f"**Company Context:** {company_context}")
    sections.append(_BODY_STANDALONE)
    return "\n\n".join(sections)
