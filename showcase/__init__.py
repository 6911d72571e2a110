"""
Project Showcase Gallery

Structure:
    - sheet_source.py: Fetch and parse the published project sheet (CSV)
    - normalizer.py: Turn loosely named sheet rows into ProjectRecords
    - video_id.py: Extract YouTube video ids, build channel/thumbnail/embed URLs
    - youtube_client.py: Batched videos.list / channels.list lookups
    - enrichment.py: Two-stage channel enrichment and the channel cache
    - projection.py: Filter records and resolve display data and click actions
    - pipeline.py: Load -> normalize -> enrich, plus filtering over the result
    - gallery_renderer.py: Static HTML gallery pages
"""
