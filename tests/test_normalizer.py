"""Tests for sheet row normalization."""

import pytest

from showcase.models import PROJECT_TYPES, ProjectRecord
from showcase.normalizer import infer_type, normalize_keys, normalize_row, normalize_rows


class TestNormalizeKeys:
    def test_trims_and_lowercases_keys(self):
        assert normalize_keys({'  Video Link ': 'x', 'TYPE': 'Shorts'}) == {'video link': 'x', 'type': 'Shorts'}

    def test_ignores_surplus_cells_and_none_values(self):
        row = {'video_link': None, None: ['extra'], 'type': ' video '}
        assert normalize_keys(row) == {'video_link': '', 'type': 'video'}


class TestColumnAliases:
    @pytest.mark.parametrize('key', [
        'video_link', 'VIDEO_LINK', ' Video_Link ', 'videolink', 'VideoLink', 'video link', 'Video Link  ',
    ])
    def test_video_link_alias_insensitivity(self, key):
        record = normalize_row({key: 'https://youtu.be/dQw4w9WgXcQ'})
        assert record == ProjectRecord(
            video_link='https://youtu.be/dQw4w9WgXcQ',
            thumb_link='',
            type='video',
            video_id='dQw4w9WgXcQ',
        )

    @pytest.mark.parametrize('key', ['shorts_link', 'Shorts Link', 'SHORTSLINK'])
    def test_shorts_link_aliases(self, key):
        record = normalize_row({key: 'https://youtube.com/shorts/abcdefghijk'})
        assert record.video_link == 'https://youtube.com/shorts/abcdefghijk'
        assert record.type == 'shorts'

    @pytest.mark.parametrize('key', ['thumbnail_link', 'ThumbnailLink', 'Thumbnail Link'])
    def test_thumbnail_aliases(self, key):
        record = normalize_row({key: 'https://example.com/t.png'})
        assert record.thumb_link == 'https://example.com/t.png'

    def test_thumbnail_falls_back_to_any_thumbnail_column(self):
        record = normalize_row({
            'Video Link': 'https://youtu.be/dQw4w9WgXcQ',
            'Thumbnail link (optional)': 'https://example.com/t.png',
        })
        assert record.thumb_link == 'https://example.com/t.png'

    def test_explicit_alias_wins_over_fallback_column(self):
        record = normalize_row({
            'thumbnail (old)': 'https://example.com/old.png',
            'thumbnail_link': 'https://example.com/new.png',
        })
        assert record.thumb_link == 'https://example.com/new.png'


class TestTypeResolution:
    def test_explicit_type_is_lowercased_and_trimmed(self):
        record = normalize_row({'video_link': 'https://youtu.be/dQw4w9WgXcQ', 'Type': '  Thumbnail '})
        assert record.type == 'thumbnail'

    def test_explicit_type_beats_shorts_column(self):
        record = normalize_row({'shorts_link': 'https://youtube.com/shorts/abcdefghijk', 'type': 'video'})
        assert record.video_link == 'https://youtube.com/shorts/abcdefghijk'
        assert record.type == 'video'

    def test_video_link_wins_over_shorts_link(self):
        record = normalize_row({
            'video_link': 'https://youtu.be/dQw4w9WgXcQ',
            'shorts_link': 'https://youtube.com/shorts/abcdefghijk',
        })
        assert record.video_link == 'https://youtu.be/dQw4w9WgXcQ'
        # explicit shorts column still drives inference
        assert record.type == 'shorts'

    def test_shorts_path_in_video_link(self):
        record = normalize_row({'video_link': 'https://www.youtube.com/shorts/abcdefghijk'})
        assert record.type == 'shorts'
        assert record.video_id == 'abcdefghijk'

    def test_thumbnail_only_row(self):
        record = normalize_row({'thumbnail_link': 'https://example.com/t.png', 'type': ''})
        assert record.type == 'thumbnail'
        assert record.video_id is None

    def test_unrecognised_type_is_inferred_instead(self):
        record = normalize_row({'video_link': 'https://youtu.be/dQw4w9WgXcQ', 'type': 'reel'})
        assert record.type == 'video'

    @pytest.mark.parametrize('video, shorts, thumb, expected', [
        ('', 'https://youtube.com/shorts/abcdefghijk', '', 'shorts'),
        ('https://youtube.com/shorts/abcdefghijk', '', '', 'shorts'),
        ('https://youtu.be/dQw4w9WgXcQ', '', 'https://example.com/t.png', 'video'),
        ('', '', 'https://example.com/t.png', 'thumbnail'),
        ('', '', '', 'video'),
    ])
    def test_infer_type(self, video, shorts, thumb, expected):
        assert infer_type(video, shorts, thumb) == expected


class TestNormalizeRows:
    def test_rows_without_links_are_dropped(self, sample_rows):
        records = normalize_rows(sample_rows)
        assert len(records) == 3
        assert all(r.thumb_link or r.video_link for r in records)
        assert all(r.type in PROJECT_TYPES for r in records)

    def test_order_is_preserved(self, sample_rows):
        records = normalize_rows(sample_rows)
        assert [r.type for r in records] == ['video', 'shorts', 'thumbnail']

    def test_video_and_shorts_scenario(self):
        records = normalize_rows([
            {'video_link': 'https://youtu.be/dQw4w9WgXcQ', 'type': ''},
            {'shorts_link': 'https://youtube.com/shorts/abcdefghijk', 'type': ''},
        ])
        assert [r.type for r in records] == ['video', 'shorts']
        assert [r.video_id for r in records] == ['dQw4w9WgXcQ', 'abcdefghijk']

    def test_case_and_whitespace_variants_yield_identical_records(self):
        a = normalize_rows([{'video_link': 'https://youtu.be/dQw4w9WgXcQ', 'thumbnail_link': 'https://x/t.png'}])
        b = normalize_rows([{' VIDEO LINK ': 'https://youtu.be/dQw4w9WgXcQ', 'Thumbnail_Link  ': 'https://x/t.png'}])
        assert a == b

    def test_normalizing_canonical_records_is_a_no_op(self, sample_rows):
        records = normalize_rows(sample_rows)
        again = normalize_rows([r.to_row() for r in records])
        assert again == records

    def test_empty_input(self):
        assert normalize_rows([]) == []

    def test_does_not_mutate_input_rows(self):
        row = {'Shorts_Link': 'https://youtube.com/shorts/abcdefghijk'}
        normalize_rows([row])
        assert row == {'Shorts_Link': 'https://youtube.com/shorts/abcdefghijk'}
