"""
formscore_api - in-process calling layer for the scoring engine.

Loads a form's answer key through a repository, gates submissions on the
form's status, runs the engine and logs the outcome. The owning
application starts it with formscore_api.app.start_scoring_service.
"""
