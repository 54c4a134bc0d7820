
import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import judgelib.__main__

GRADED = '''id,label,Excellent,VeryGood,Good,Fair,Passable,Inadequate,Bad
1,Pizza,0,1,2,1,0,1,1
2,Sushi,1,0,3,0,0,0,0
'''


@pytest.fixture
def graded_file(tmp_path):
    path = tmp_path / 'lunch.csv'
    path.write_text(GRADED, encoding='utf8')
    return str(path)


def test_judgment_ranking(graded_file, capsys):
    judgelib.__main__.run(['-i', graded_file, '-q'])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith('1   Sushi')
    assert lines[0].endswith('Good • score: 0.33')
    assert lines[1].startswith('2   Pizza')
    assert lines[1].endswith('Good • score: -1.00')


def test_csv_output(graded_file, capsys):
    judgelib.__main__.run(['-i', graded_file, '-c', '-t', 'typical', '-q'])
    assert capsys.readouterr().out.splitlines() == [
        'rank,id,label,majority_grade,score,majority_share',
        '1,2,Sushi,Good,0.25,100.0%',
        '2,1,Pizza,Good,-0.33,50.0%',
    ]


def test_approval_ranking(tmp_path, capsys):
    path = tmp_path / 'poll.csv'
    path.write_text('id,label,approvals\n1,Pizza,3\n2,Sushi,5\n')
    judgelib.__main__.run(['-i', str(path), '-n', '10', '-q'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('1   Sushi')
    assert lines[0].endswith('5 approvals (50.0%)')
    assert lines[1].endswith('3 approvals (30.0%)')


def test_empty_table(tmp_path, capsys):
    path = tmp_path / 'empty.csv'
    path.write_text('id,label,approvals\n')
    with pytest.warns(UserWarning):
        judgelib.__main__.run(['-i', str(path), '-q'])
    assert capsys.readouterr().out == ''


def test_no_input(capsys):
    judgelib.__main__.run([])
    assert capsys.readouterr().out.startswith('usage:')


def test_unknown_scale(graded_file):
    with pytest.raises(SystemExit):
        judgelib.__main__.run(['-i', graded_file, '-s', 'stars'])


def test_ballot_count_ignored_for_grades(graded_file, capsys):
    with pytest.warns(UserWarning, match='approval tables'):
        judgelib.__main__.run(['-i', graded_file, '-n', '10', '-q'])
    assert len(capsys.readouterr().out.splitlines()) == 2
