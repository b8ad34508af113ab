# puzzles.py — the puzzles of Sigils of Elohim with their reference solutions
from __future__ import annotations

from typing import NamedTuple, Tuple


class Puzzle(NamedTuple):
    section: str
    color: str
    number: int
    row_count: int
    column_count: int
    tetrominoes: str
    solution: str

    @property
    def label(self) -> str:
        return f"{self.section} {self.color} {self.number}"


PUZZLES: Tuple[Puzzle, ...] = (
    Puzzle("A", "cyan", 1, 4, 4, "LLZZ", "AAAB\nACBB\nCCBD\nCDDD\n"),
    Puzzle("A", "cyan", 2, 4, 4, "IJLZ", "ABBC\nABCC\nABCD\nADDD\n"),
    Puzzle("A", "cyan", 3, 5, 4, "ITTLZ", "AAAA\nBBBC\nDBCC\nDEEC\nDDEE\n"),
    Puzzle("A", "cyan", 4, 5, 4, "JLSZZ", "AABB\nABBC\nADCC\nDDCE\nDEEE\n"),
    Puzzle("A", "cyan", 5, 4, 4, "ITTL", "ABBB\nACBD\nACDD\nACCD\n"),
    Puzzle("A", "cyan", 6, 4, 5, "TTLSZ", "AAABB\nCABBD\nCEEDD\nCCEED\n"),
    Puzzle("A", "cyan", 7, 5, 4, "TTJSZ", "AAAB\nCABB\nCCBD\nCEED\nEEDD\n"),
    Puzzle("A", "cyan", 8, 6, 4, "IOTTJZ", "ABBB\nACCB\nACCD\nAEDD\nEEFD\nEFFF\n"),
    Puzzle("A", "green", 1, 6, 4, "IOTTLZ", "ABCC\nABCC\nABBD\nAEDD\nEEFD\nEFFF\n"),
    Puzzle("A", "green", 2, 4, 7, "ITTJJLZ", "ABBBCDD\nAEBCCDF\nAEGGCDF\nAEEGGFF\n"),
    Puzzle("A", "green", 3, 6, 4, "IOSZJL", "AABB\nABBC\nADDC\nEDDC\nEFFC\nEEFF\n"),
    Puzzle("A", "green", 4, 6, 6, "TIOTTOLTJ", "ABBCCC\nABBDEC\nADDDEE\nAFFFEG\nHHFIGG\nHHIIIG\n"),
    Puzzle("A", "green", 5, 6, 6, "OTTTTLLLL", "AABBBC\nAADBCC\nEEDDFC\nGEDFFF\nGEHHHI\nGGHIII\n"),
    Puzzle("A", "green", 6, 8, 5, "IIIIJJLLSZ", "ABCDD\nABCDE\nABCDE\nABCEE\nFFFFG\nHHHGG\nHIIGJ\nIIJJJ\n"),
    Puzzle("A", "green", 7, 8, 5, "IITTTTJLSZ", "ABCCC\nABDCE\nABDDE\nABDEE\nFFFGG\nHFGGI\nHJJII\nHHJJI\n"),
    Puzzle("A", "green", 8, 8, 6, "OOTTTTSSZZJL", "AABBCC\nAABBDC\nEEFDDC\nEFFDGG\nEFHGGI\nJHHHII\nJJKKLI\nJKKLLL\n"),
    Puzzle("A", "yellow", 1, 6, 6, "IOOJLSSZZ", "ABBBCC\nADDBCC\nADDEEF\nAGEEFF\nGGHHFI\nGHHIII\n"),
    Puzzle("A", "yellow", 2, 8, 6, "TTILLJJJOOZZ", "ABBCCD\nABBCCD\nAEEEDD\nAFEGGG\nFFHHHG\nIFHJJJ\nIKKLLJ\nIIKKLL\n"),
    Puzzle("A", "yellow", 3, 4, 7, "LJZZTTI", "ABBBCCC\nADBEECF\nADGGEEF\nADDGGFF\n"),
    Puzzle("A", "yellow", 4, 5, 4, "LLJTT", "AAAB\nCABB\nCCCB\nDDDE\nDEEE\n"),
    Puzzle("A", "yellow", 5, 5, 4, "LZSTT", "AAAB\nACBB\nCCDB\nCEDD\nEEED\n"),
    Puzzle("A", "yellow", 6, 6, 6, "IOOZZLLJJ", "ABBCCD\nABBCDD\nAEECDF\nAEEGFF\nHGGGFI\nHHHIII\n"),
    Puzzle("A", "yellow", 7, 10, 4, "STTTTOOILL", "ABCC\nABBC\nABDC\nAEDD\nEEFD\nGEFF\nGGFH\nGHHH\nIIJJ\nIIJJ\n"),
    Puzzle("A", "yellow", 8, 8, 5, "ZZSTTIILLO", "ABCDD\nABCDD\nABCCE\nABFEE\nGGFFE\nHGGFI\nHJJII\nHHJJI\n"),
    Puzzle("A", "red", 1, 6, 6, "OOTTLLJIS", "ABBCCC\nABBDCE\nADDDEE\nAFFGHE\nIFFGHH\nIIIGGH\n"),
    Puzzle("A", "red", 2, 6, 6, "ZZZLLJJTT", "AAABCC\nDABBBC\nDDDEEC\nFFGGEE\nHFFGGI\nHHHIII\n"),
    Puzzle("A", "red", 3, 5, 4, "IOOJJ", "ABBC\nABBC\nADCC\nADEE\nDDEE\n"),
    Puzzle("A", "red", 4, 6, 8, "TTOOILLJJJSS", "ABBCCDEE\nABBCCDDE\nAFFGGDHE\nAFGGHHHI\nJFKKKLLI\nJJJKLLII\n"),
    Puzzle("A", "red", 5, 5, 4, "TTZLI", "AAAA\nBBBC\nDBCC\nDEEC\nDDEE\n"),
    Puzzle("A", "red", 6, 10, 4, "TTTTZZSIIJ", "ABBB\nACBD\nACDD\nACED\nFCEE\nFFEG\nFHGG\nHHGI\nHJJI\nJJII\n"),
    Puzzle("A", "red", 7, 4, 7, "IITTZSL", "ABCCCDD\nABECDDF\nABEGGFF\nABEEGGF\n"),
    Puzzle("A", "red", 8, 6, 8, "ITTOOSZZZJJJ", "ABBCCDDD\nABBCCEDF\nAGGHEEFF\nAGHHIEFJ\nKGHIILLJ\nKKKILLJJ\n"),
    Puzzle("B", "cyan", 1, 4, 4, "OOLL", "AABB\nAABB\nCCCD\nCDDD\n"),
    Puzzle("B", "cyan", 2, 4, 5, "LLZZI", "ABBBC\nABDCC\nADDCE\nADEEE\n"),
    Puzzle("B", "cyan", 3, 4, 5, "JJLLI", "ABCCC\nABBBC\nADDDE\nADEEE\n"),
    Puzzle("B", "cyan", 4, 4, 6, "JLSTTI", "ABBBCC\nADBCCE\nADFFFE\nADDFEE\n"),
    Puzzle("B", "cyan", 5, 4, 4, "IOLJ", "ABBB\nACCB\nACCD\nADDD\n"),
    Puzzle("B", "cyan", 6, 5, 4, "TTZZL", "ABBB\nAABC\nADCC\nDDCE\nDEEE\n"),
    Puzzle("B", "cyan", 7, 6, 4, "JLSOII", "ABBB\nACCB\nACCD\nAEED\nEEFD\nFFFD\n"),
    Puzzle("B", "cyan", 8, 4, 4, "ILJZ", "ABBC\nABCC\nABCD\nADDD\n"),
    Puzzle("B", "green", 1, 4, 5, "LLLJZ", "AABCC\nABBDC\nABEDC\nEEEDD\n"),
    Puzzle("B", "green", 2, 4, 6, "TTSSZL", "AAABBC\nDABBCC\nDDEECF\nDEEFFF\n"),
    Puzzle("B", "green", 3, 6, 6, "IOLLLLJTT", "ABBCCC\nABBDCE\nADDDEE\nAFFFGE\nHFGGGI\nHHHIII\n"),
    Puzzle("B", "green", 4, 5, 8, "OOOOOOOLLI", "AAAABBCC\nDDEEBBCC\nDDEEFFGG\nHHIIFFJG\nHHIIJJJG\n"),
    Puzzle("B", "green", 5, 6, 6, "LLJZTTOOI", "ABBCCC\nABBDCE\nAFFDDE\nAGFDEE\nGGFHII\nGHHHII\n"),
    Puzzle("B", "green", 6, 5, 8, "OOLLLJIIIS", "ABCCCCDD\nABEEEFDD\nABEGHFFF\nABIGHHJJ\nIIIGGHJJ\n"),
    Puzzle("B", "green", 7, 6, 6, "JJJJZZOOO", "AABBCC\nAABBCC\nDDDEEE\nFFDGGE\nHFFIGG\nHHHIII\n"),
    Puzzle("B", "green", 8, 5, 8, "TTTTOOSZJI", "ABBCCDDE\nABBCCDEE\nAFFFGDHE\nAIFGGJHH\nIIIGJJJH\n"),
    Puzzle("B", "yellow", 1, 4, 10, "OJTTSSZZII", "ABBBBCCDDE\nAFFFCCDDEE\nAGGFHIIJJE\nAGGHHHIIJJ\n"),
    Puzzle("B", "yellow", 2, 4, 5, "JTTSZ", "AABBC\nABBCC\nADEEC\nDDDEE\n"),
    Puzzle("B", "yellow", 3, 7, 4, "ITTTTZO", "AAAB\nCABB\nCDDB\nCDDE\nCFEE\nFFGE\nFGGG\n"),
    Puzzle("B", "yellow", 4, 4, 10, "TTZSSLLLIO", "ABBBCCDEFF\nAGBCCDDEFF\nAGGHHDIEEJ\nAGHHIIIJJJ\n"),
    Puzzle("B", "yellow", 5, 8, 6, "LJJJJIOOTTSS", "ABBCCD\nABBCCD\nAEEEDD\nAFEGGG\nFFHHHG\nIFJJHK\nIJJLLK\nIILLKK\n"),
    Puzzle("B", "yellow", 6, 4, 10, "OJZZSSTTII", "ABBBBCCDDE\nAFFFCCDDEE\nAGGFHIIJJE\nAGGHHHIIJJ\n"),
    Puzzle("B", "yellow", 7, 7, 4, "TOTIZTT", "AAAB\nCABB\nCDDB\nCDDE\nCFEE\nFFGE\nFGGG\n"),
    Puzzle("B", "yellow", 8, 6, 8, "TTTTOOZJJLLI", "ABBCCDDD\nABBCCEDF\nAGGHEEFF\nAGHHHEIF\nJGKKIIIL\nJJJKKLLL\n"),
    Puzzle("B", "red", 1, 4, 7, "TTTTSSI", "ABBBCCD\nAEBCCDD\nAEEFFGD\nAEFFGGG\n"),
    Puzzle("B", "red", 2, 10, 4, "ZZLLLIITTS", "ABCC\nABDC\nABDC\nABDD\nEEEF\nGEFF\nGGFH\nIGHH\nIJJH\nIIJJ\n"),
    Puzzle("B", "red", 3, 10, 4, "LLLSSZZZTT", "AAAB\nCABB\nCDDB\nCCDD\nEEFF\nGEEF\nGGHF\nIGHH\nIJJH\nIIJJ\n"),
    Puzzle("B", "red", 4, 5, 4, "ITTLZ", "AAAA\nBBBC\nDBCC\nDEEC\nDDEE\n"),
    Puzzle("B", "red", 5, 5, 8, "TTTTOOSZJI", "ABBCCDDE\nABBCCDEE\nAFFFGDHE\nAIFGGJHH\nIIIGJJJH\n"),
    Puzzle("B", "red", 6, 5, 8, "TTTTLJSSZZ", "AAABCDDD\nEABBCCDF\nEEGBCHFF\nIEGGHHFJ\nIIIGHJJJ\n"),
    Puzzle("B", "red", 7, 4, 10, "OJZZSSTTII", "ABBBBCCDDE\nAFFFCCDDEE\nAGGFHIIJJE\nAGGHHHIIJJ\n"),
    Puzzle("B", "red", 8, 6, 8, "TTTTOOZJJLLI", "ABBCCDDD\nABBCCEDF\nAGGHEEFF\nAGHHHEIF\nJGKKIIIL\nJJJKKLLL\n"),
    Puzzle("C", "cyan", 1, 4, 4, "SSJJ", "AABB\nABBC\nADDC\nDDCC\n"),
    Puzzle("C", "cyan", 2, 4, 4, "TTLZ", "AAAB\nCABB\nCDDB\nCCDD\n"),
    Puzzle("C", "cyan", 3, 5, 4, "JJLLO", "AABB\nAACB\nDDCB\nDCCE\nDEEE\n"),
    Puzzle("C", "cyan", 4, 8, 5, "TTZSSIIOLJ", "ABCDD\nABCDD\nABCCE\nABFEE\nGFFHE\nGGFHH\nIGJJH\nIIIJJ\n"),
    Puzzle("C", "cyan", 5, 7, 4, "IIITTJO", "ABCC\nABCC\nABDE\nABDE\nFDDE\nFFGE\nFGGG\n"),
    Puzzle("C", "cyan", 6, 6, 6, "LLJJOOOOI", "ABBCCD\nABBCCD\nAEEFDD\nAEEFGG\nHHFFIG\nHHIIIG\n"),
    Puzzle("C", "cyan", 7, 6, 6, "LLLLLLLLI", "ABCCCD\nABCDDD\nABBEFF\nAEEEGF\nHHHIGF\nHIIIGG\n"),
    Puzzle("C", "cyan", 8, 8, 5, "TSSTTISZTS", "ABBBC\nADBCC\nADDEC\nAFDEE\nGFFHE\nGGFHH\nGIJJH\nIIIJJ\n"),
    Puzzle("C", "green", 1, 6, 4, "SSSSJJ", "ABBB\nAACB\nDACC\nDDEC\nFDEE\nFFFE\n"),
    Puzzle("C", "green", 2, 5, 4, "IOLSL", "AAAB\nACCB\nCCDB\nEEDB\nEEDD\n"),
    Puzzle("C", "green", 3, 4, 5, "ZTTSJ", "AABBC\nABBCC\nADEEC\nDDDEE\n"),
    Puzzle("C", "green", 4, 4, 6, "LLLJIO", "ABBBCC\nADDBEC\nADDFEC\nAFFFEE\n"),
    Puzzle("C", "green", 5, 6, 6, "TILITOSIO", "ABCCDD\nABCCDD\nABEFFF\nABEEFG\nHHHEGG\nHIIIIG\n"),
    Puzzle("C", "green", 6, 5, 8, "JILOIJLLTT", "ABCCDEEE\nABCCDDEF\nABGGDFFF\nABHGIJJJ\nHHHGIIIJ\n"),
    Puzzle("C", "green", 7, 6, 6, "OJJOISZJJ", "ABBCCC\nABBDDC\nAEEFDD\nAEEFFG\nHIIIFG\nHHHIGG\n"),
    Puzzle("C", "green", 8, 6, 6, "TSTSOSTST", "AAABBC\nDABBCC\nDDEEFC\nGDEEFF\nGGHHIF\nGHHIII\n"),
    Puzzle("C", "yellow", 1, 10, 4, "SJTIIZTJJO", "ABBC\nABBC\nADDC\nADEC\nFDEE\nFFGE\nFGGG\nHHIJ\nHIIJ\nHIJJ\n"),
    Puzzle("C", "yellow", 2, 8, 5, "OLSLLLITJT", "ABBCC\nABBDC\nAEFDC\nAEFDD\nEEFFG\nHHHGG\nHIIJG\nIIJJJ\n"),
    Puzzle("C", "yellow", 3, 6, 6, "JTLZSOSJT", "AABBBC\nAADBCC\nEEDDFC\nEGHDFF\nEGHIIF\nGGHHII\n"),
    Puzzle("C", "yellow", 4, 5, 4, "ZLIOL", "AAAB\nACCB\nDCCB\nDEEB\nDDEE\n"),
    Puzzle("C", "yellow", 5, 6, 4, "ZLSLJJ", "AABB\nACCB\nACDB\nECDD\nEFFD\nEEFF\n"),
    Puzzle("C", "yellow", 6, 6, 6, "TTJZJLTTL", "AAABBB\nCADDBE\nCCCDEE\nFFFDEG\nFHIIIG\nHHHIGG\n"),
    Puzzle("C", "yellow", 7, 8, 5, "TSSOITSOZJ", "ABBCC\nABBCC\nADDDE\nAFDEE\nGFFHE\nGGFHH\nIGJJH\nIIIJJ\n"),
    Puzzle("C", "yellow", 8, 7, 4, "LOITTZI", "ABBC\nABBC\nADDC\nAEDC\nEEDF\nEGFF\nGGGF\n"),
    Puzzle("C", "red", 1, 4, 5, "LTZST", "AAABB\nCABBD\nCEEDD\nCCEED\n"),
    Puzzle("C", "red", 2, 6, 6, "LLIIIIIII", "ABCCCC\nABDDDD\nABEEEF\nABEGGF\nHHHHGF\nIIIIGF\n"),
    Puzzle("C", "red", 3, 5, 4, "JJJZJ", "ABBB\nAAAB\nCCDE\nCDDE\nCDEE\n"),
    Puzzle("C", "red", 4, 6, 4, "TZSLTI", "ABCC\nABBC\nABDC\nAEDD\nEEFD\nEFFF\n"),
    Puzzle("C", "red", 5, 6, 6, "LIOLLSZJO", "ABBCCC\nABBDEC\nAFFDEE\nAGFDDE\nGGFHII\nGHHHII\n"),
    Puzzle("C", "red", 6, 8, 5, "ZTTLOIIJLI", "ABCDD\nABCDD\nABCEE\nABCFE\nGGFFE\nHGGFI\nHJJJI\nHHJII\n"),
    Puzzle("C", "red", 7, 6, 6, "OSSSSLLLL", "AAABCC\nADDBBC\nDDEEBC\nFGEEHH\nFGGHHI\nFFGIII\n"),
    Puzzle("C", "red", 8, 5, 8, "LJSZTTIIOO", "ABCCCDEE\nABFCDDEE\nABFFDGGH\nABIFJGGH\nIIIJJJHH\n"),
)


def select(section: str = "", color: str = "") -> Tuple[Puzzle, ...]:
    """Puzzles matching the given section and/or color (case-insensitive)."""
    return tuple(
        p for p in PUZZLES
        if (not section or p.section.lower() == section.lower())
        and (not color or p.color.lower() == color.lower())
    )
