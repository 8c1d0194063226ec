"""Link domain: scanning, grouping and classifying links in documents."""
