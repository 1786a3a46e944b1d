"""
Golden Content - targeted messaging engine for the fitness app

Selects and personalizes the "golden content" (workout titles, motivational
phrases, notifications and smart descriptions) shown to a user.

Architecture:
- Content Context: Content records, match contexts and the stores they load from
- Messaging Context: @tag resolution into final display text
- Targeting Context: Hard filtering, specificity scoring and coverage analysis
- Reporting Context: Text reports for admin tooling
"""

__version__ = "0.1.0"
