"""Learning loop components: stores, classifier, recorder and reporter."""
