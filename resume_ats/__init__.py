"""ATS compatibility scoring for tailored resumes."""

__version__ = "0.1.0"
