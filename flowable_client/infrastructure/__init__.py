"""Infrastructure: Flowable REST transport and service, directory cache."""
