"""
legalhub – AI-powered legal tools web application.

Entry point:  legalhub.main:app  (FastAPI ASGI application)

Sub-packages / modules:
    ai          Text generator, prompt flows and Marathi transliteration
    actions     Server actions: form validation and tagged results
    config      Environment-driven settings and logging setup
    features    Feature registry for the home view
    preview     Markdown → HTML live preview
    disclaimer  Footer notice for every page
"""
