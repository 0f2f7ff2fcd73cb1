"""
Fungible-position-tracking family (ERC1155): AssetFactory -> UpdatedAssetFactory

Every token id is an asset type with a WSTON value per unit; the factory
tracks the total value locked per id across mints and burns.
"""

from ..core.models import AugmentationProfile, CompanionContract

TREASURY_INTERFACE = """\
interface ITreasury {
    function transferWSTON(address _to, uint256 _amount) external returns (bool);
}
"""

STORAGE = """
    //---------------------------------------------------------------------------------------
    //--------------------------------------STRUCT-------------------------------------------
    //---------------------------------------------------------------------------------------
    
    struct Asset {
        // add any additionnal features here
        uint256 tokenId;
        uint256 wstonValuePerNFT; // 27 decimals
        uint256 totalWstonValue; // 27 decimals
        string uri;
    }

    //---------------------------------------------------------------------------------------
    //-------------------------------------STORAGE-------------------------------------------
    //---------------------------------------------------------------------------------------

    Asset[] public Assets;
    uint256 public numberOfTokens;

    // contract addresses
    address internal wston;
    address internal treasury;

    // initialized
    bool initialized;

    //---------------------------------------------------------------------------------------
    //-------------------------------------EVENTS--------------------------------------------
    //---------------------------------------------------------------------------------------

    // Premining events
    event Created(
        uint256 indexed tokenId, 
        uint256 wstonValue,
        string uri 
    );

    // mint Events
    event NFTMinted(uint256 tokenId, address to, uint256 numberOfNFTToMint);

    // burn Events
    event NFTBurnt(uint256 tokenId, address owner, uint256 numberOfNFTToBurn);

    //---------------------------------------------------------------------------------------
    //-------------------------------------ERRORS--------------------------------------------
    //---------------------------------------------------------------------------------------

    // setup errors
    error WrongNumberOfValues();

    // minting errors
    error AddressZero();
    error WrongNumberOfNFTToMint();
    error WrongTokenId();

    // tranfer errors
    error TransferFailed();
    
    // access errors
    error UnauthorizedCaller(address caller);
"""

FUNCTIONS = """
    /**
     * @notice Modifier to ensure the caller is the treasury contract
     */
    modifier onlyTreasury() {
        if (msg.sender != treasury) {
            revert UnauthorizedCaller(msg.sender);
        }
        _;
    }

    /**
     * @notice Initializes the contract with the given parameters.
     * @param _wston Address of the WSTON token.
     * @param _treasury Address of the treasury contract.
     * @param wstonValues values Values associated with each token Id
     * @param uris uris associated with each token Id
     */
    function initialize(
        address _wston, 
        address _treasury,
        uint256[] memory wstonValues,
        string[] memory uris
    ) external onlyOwner {
        require(initialized == false, "already initialized");
        wston = _wston;
        treasury = _treasury;
        for(uint256 i = 0; i < wstonValues.length; i++) {
            // Create the new asset 
            Asset memory newAsset = Asset({
                tokenId: i,
                wstonValuePerNFT: wstonValues[i],
                totalWstonValue: 0,
                uri: uris[i]
            });
            Assets.push(newAsset);

            // Emit an event for the creation of the new NFT
            emit Created(i, wstonValues[i], uris[i]);
        }
        numberOfTokens += wstonValues.length - 1;
        initialized == true;
    }

    /**
     * @notice Sets the treasury address.
     * @param _treasury The new treasury address.
     */
    function setTreasury(address _treasury) external onlyOwner {
        treasury = _treasury;
    }

    /**
     * @notice Updates the wston token address.
     * @param _wston New wston token address.
     */
    function setWston(address _wston) external onlyOwner {
        wston = _wston;
    }

    /**
     * @notice updates the wston value associated with each tokenId
     * @param wstonValues New wston values array.
     */
    function setWstonValuesAssociatedWtihTokenIds(uint256[] memory wstonValues) external onlyOwner {
        if(wstonValues.length != Assets.length) {
            revert WrongNumberOfValues();
        }

        for(uint256 i = 0; i < wstonValues.length; i++) {
            Assets[i].wstonValuePerNFT = wstonValues[i];
        }
    }

    /**
     * @notice mints a new NFT for a specific token ID
     * @param _tokenId ID of the token to mint.
     * @param _to beneficiary of the NFT
     * @param _numberOfNFTToMint number of NFT to mint
     * @dev The caller must be the treasury.
     */
    function mintAsset(uint256 _tokenId, address _to, uint256 _numberOfNFTToMint) external onlyTreasury {
        // reverts if wrong number of NFT to mint
        if(_numberOfNFTToMint == 0) {
            revert WrongNumberOfNFTToMint();
        }
        // Check if the recipient's address is zero
        if (_to == address(0)) {
            revert AddressZero();
        }

        // if the token id passed in parameter does not exist
        if(_tokenId > numberOfTokens) {
            revert WrongTokenId();
        }
        
        // updates storage
        uint256 wstonValueOfNFTs = Assets[_tokenId].wstonValuePerNFT * _numberOfNFTToMint;
        Assets[_tokenId].totalWstonValue += wstonValueOfNFTs;
        // mint the NFT
        _mint(_to, _tokenId, _numberOfNFTToMint, "");
        emit NFTMinted(_tokenId, _to, _numberOfNFTToMint);
    }

    /**
     * @notice burns an asset token, converting it back to its value.
     * @param _tokenId ID of the token to melt.
     * @dev The caller receives the WSTON amount associated with the NFT.
     * @dev The ERC1155 token is burned.
     * @dev The caller must be the token owner.
     */
    function burnAsset(uint256 _tokenId, uint256 _numberOfNFTToBurn) external {
        // Check if the caller's address is zero
        if (msg.sender == address(0)) {
            revert AddressZero();
        }

        //updates storage
        uint256 totalWstonValueToTransfer = Assets[_tokenId].wstonValuePerNFT * _numberOfNFTToBurn;
        Assets[_tokenId].totalWstonValue -= totalWstonValueToTransfer;

        // Burn the ERC1155 token
        _burn(msg.sender, _tokenId, _numberOfNFTToBurn);
        // Transfer the WSTON amount to the caller
        if (!ITreasury(treasury).transferWSTON(msg.sender, totalWstonValueToTransfer)) {
            revert TransferFailed();
        }
        // Emit an event indicating the NFT has been melted
        emit NFTBurnt(_tokenId, msg.sender, _numberOfNFTToBurn);
    }

    /**
     * @notice Creates a new ERC1155 type of NFT.
     * @param _wstonValue WSTON value of the new NFT to be created.
     * @param _uri TokenURI of the NFT.
     */
    function createAsset(uint256 _wstonValue, string memory _uri)
        public
        onlyOwner
    {
        // Create the new asset 
        Asset memory newAsset = Asset({
            tokenId: numberOfTokens,
            wstonValuePerNFT: _wstonValue,
            totalWstonValue: 0,
            uri: _uri
        });
        Assets.push(newAsset);
        numberOfTokens++;

        // Emit an event for the creation of the new NFT
        emit Created(numberOfTokens, _wstonValue, _uri);
    }

    /**
     * @notice Retrieves the details of a specific NFT by its token ID.
     * @param _tokenId The ID of the NFT to retrieve.
     * @return The NFT struct containing details of the specified NFT.
     */
    function getAsset(uint256 _tokenId) public view returns (Asset memory) {
        return Assets[_tokenId];
    }

    /**
     * @notice Retrieves the total wston value locked for a specific tokenId.
     * @param _tokenId The token Id.
     */
    function getTotalWstonValue(uint256 _tokenId) external view returns(uint256) {
        return Assets[_tokenId].totalWstonValue;
    }

    /**
     * @notice Retrieves the wston value of a single NFT for a specific tokenId.
     * @param _tokenId The token Id.
     */
    function getWstonValuePerNft(uint256 _tokenId) external view returns(uint256) {
        return Assets[_tokenId].wstonValuePerNFT;
    } 

    /**
     * @notice Calculates the total value of all Assets in supply.
     * @return totalValue The cumulative value of all Assets.
     */
    function getAssetsSupplyTotalValue() external view returns (uint256 totalValue) {
        uint256 Assetslength = Assets.length;

        // Sum the values of all Assets to get the total supply value
        for (uint256 i = 0; i < Assetslength; ++i) {
            totalValue += Assets[i].totalWstonValue;
        }
    }

    /**
     * @notice returns the uri associated with a specific tokenId
     */
    function uri(uint256 _tokenId) public view override returns(string memory) {
        return Assets[_tokenId].uri;
    }

    //---------------------------------------------------------------------------------------
    //-------------------------------STORAGE GETTERS-----------------------------------------
    //---------------------------------------------------------------------------------------

    function getTreasuryAddress() external view returns (address) {
        return treasury;
    }

    function getWstonAddress() external view returns (address) {
        return wston;
    }


"""

TREASURY = """\
// SPDX-License-Identifier: MIT
pragma solidity 0.8.28;

import { SafeERC20 } from "@openzeppelin/contracts/token/ERC20/utils/SafeERC20.sol";
import { IERC20 } from "@openzeppelin/contracts/token/ERC20/IERC20.sol";
import "@openzeppelin/contracts-upgradeable/access/OwnableUpgradeable.sol";
import { IERC1155Receiver } from "@openzeppelin/contracts/token/ERC1155/IERC1155Receiver.sol";
import { ReentrancyGuard } from "@openzeppelin/contracts/utils/ReentrancyGuard.sol";


/**
 * @title Treasury Contract for Token managememnt
 * @author TOKAMAK OPAL TEAM
 * @notice This contract manages the storage and transfer of NFT tokens and WSTON tokens within the ecosystem.
 * It facilitates interactions with the assetFactory contract.
 * The contract includes functionalities for creating premined NFTs, handling token transfers, and managing sales on the marketplace.
 * @dev The contract integrates with external interfaces for NFT creation, marketplace operations, and token swaps.
 * It includes security features such as pausing operations and role-based access control.
 */

interface IAssetFactory {
    struct Asset {
        // add any additionnal features here
        uint256 tokenId;
        uint256 wstonValuePerNFT; // 27 decimals
        uint256 totalWstonValue; // 27 decimals
        string uri;
    }

    function mintAsset(uint256 _tokenId, address _to, uint256 _numberOfNFTToMint) external;

    function safeTransferFrom(address from, address to, uint256 tokenId, uint256 numberOfTokens, bytes memory data) external;

    function getAssetsSupplyTotalValue() external view returns(uint256 totalValue);

    function getApproved(uint256 tokenId) external view returns (address);

    function approve(address to, uint256 tokenId) external;

    function getAsset(uint256 tokenId) external view returns (Asset memory);

    function getWstonValuePerNft(uint256 _tokenId) external view returns (uint256);

}

contract Treasury is IERC1155Receiver, ReentrancyGuard, OwnableUpgradeable {
    using SafeERC20 for IERC20;

    address internal assetFactory;
    address internal wston;
    
    bool paused = false;
    bool internal initialized;

    error InvalidAddress();
    error UnsuffiscientWstonBalance();
    error NotEnoughWstonAvailableInTreasury();

    modifier whenNotPaused() {
      require(!paused, "Pausable: paused");
      _;
    }


    modifier whenPaused() {
        require(paused, "Pausable: not paused");
        _;
    }

    modifier onlyOwnerOrAssetFactory() {
      require(msg.sender == owner() || msg.sender == assetFactory, "caller is neither owner nor AssetFactory");
      _;
    }

    function pause() public onlyOwner whenNotPaused {
        paused = true;
    }

    function unpause() public onlyOwner whenPaused {
        paused = false;
    }

    //---------------------------------------------------------------------------------------
    //--------------------------------INITIALIZE FUNCTIONS-----------------------------------
    //---------------------------------------------------------------------------------------

    /**
     * @notice Initializes the Treasury contract with the given parameters.
     * @param _owner owner of the contract
     * @param _wston Address of the WSTON token.
     * @param _assetFactory Address of the NFT factory contract.
     */
    function initialize(address _owner, address _wston, address _assetFactory) external {
        require(!initialized, "already initialized");   
        __Ownable_init(_owner);
        assetFactory = _assetFactory;
        wston = _wston;
        initialized = true;
    }

     /**
     * @notice Sets the address of the NFT factory.
     * @param _assetFactory New address of the NFT factory contract.
     */
    function setAssetFactory(address _assetFactory) external onlyOwner {
        _checkNonAddress(assetFactory);
        assetFactory = _assetFactory;
    }

    /**
     * @notice updates the wston token address
     * @param _wston New wston token address
     */
    function setWston(address _wston) external onlyOwner {
        wston = _wston;
    }

    //---------------------------------------------------------------------------------------
    //--------------------------------EXTERNAL FUNCTIONS-------------------------------------
    //---------------------------------------------------------------------------------------

    /**
     * @notice Transfers WSTON tokens to a specified address.
     * @param _to Address to transfer WSTON tokens to.
     * @param _amount Amount of WSTON tokens to transfer.
     * @dev only the assetFactory, MarketPlace, RandomPack, Airdrop or the Owner are authorized to transfer the funds
     * @return bool Returns true if the transfer is successful.
     */
    function transferWSTON(address _to, uint256 _amount) external onlyOwnerOrAssetFactory nonReentrant returns(bool) {
        // check _to diffrent from address(0)
        _checkNonAddress(_to);

        // check the balance of the treasury
        uint256 contractWSTONBalance = getWSTONBalance();
        if(contractWSTONBalance < _amount) {
            revert UnsuffiscientWstonBalance();
        }

        // transfer to the recipient
        IERC20(wston).safeTransfer(_to, _amount);
        return true;
    }

    /**
     * @notice mints a new NFT for a specific token ID
     * @param _tokenId ID of the token to mint.
     * @param _to beneficiary of the NFT
     * @param _numberOfNFTToMint number of NFT to mint
     * @dev The caller must be the contract owner.
     */
    function mintNewAssets( 
        uint256 _tokenId,
        address _to,
        uint256 _numberOfNFTToMint
    ) external onlyOwner whenNotPaused {
        // safety check for WSTON solvency
        if(getWSTONBalance() < IAssetFactory(assetFactory).getAssetsSupplyTotalValue() + (IAssetFactory(assetFactory).getWstonValuePerNft(_tokenId) * _numberOfNFTToMint)) {
            revert NotEnoughWstonAvailableInTreasury();
        }

        // we create the NFTs from the assetFactory
        IAssetFactory(assetFactory).mintAsset(
            _tokenId,
            _to,
            _numberOfNFTToMint
        );
    }


    /**
     * @notice Transfers a NFT from the treasury to a specified address.
     * @param _to Address to transfer the NFT to.
     * @param _tokenId ID of the token to transfer.
     * @param _numberOfTokens number of NFT to send
     * @param data data to handle errors
     * @dev only the Owner is able to transfer tokens from the treasury
     * @return bool Returns true if the transfer is successful.
     */
    function transferTreasuryTokensto(address _to, uint256 _tokenId, uint256 _numberOfTokens, bytes memory data) external onlyOwner returns(bool) {
        IAssetFactory(assetFactory).safeTransferFrom(address(this), _to, _tokenId, _numberOfTokens, data);
        return true;
    }

    /**
     * @notice Handles the receipt of an ERC1155 token.
     * @return bytes4 Returns the selector of the onERC1155Received function.
     */
    function onERC1155Received(
        address /*operator*/,
        address /*from*/,
        uint256 /*tokenId*/,
        uint256 /*value*/,
        bytes calldata /*data*/
    ) external pure override returns (bytes4) {
        return this.onERC1155Received.selector;
    }

    /**
     * @notice Handles the receipt of a batch of ERC1155 tokens.
     * @return bytes4 Returns the selector of the onERC1155BatchReceived function.
     */
    function onERC1155BatchReceived(
        address /*operator*/,
        address /*from*/,
        uint256[] calldata /*ids*/,
        uint256[] calldata /*values*/,
        bytes calldata /*data*/
    ) external pure returns (bytes4) {
        return this.onERC1155BatchReceived.selector;
    }

    function supportsInterface(bytes4 interfaceId) public view override returns (bool) {
        return this.supportsInterface(interfaceId);
    }

    //---------------------------------------------------------------------------------------
    //--------------------------------INTERNAL FUNCTIONS-------------------------------------
    //---------------------------------------------------------------------------------------

    /**
     * @notice Checks if the provided address is a non-zero address.
     * @param account Address to check.
     */
    function _checkNonAddress(address account) internal pure {
        if(account == address(0))   revert InvalidAddress();
    }

    //---------------------------------------------------------------------------------------
    //------------------------STORAGE GETTER / VIEW FUNCTIONS--------------------------------
    //---------------------------------------------------------------------------------------

    // Function to check the balance of WSTON token within the contract
    function getWSTONBalance() public view returns (uint256) {
        return IERC20(wston).balanceOf(address(this));
    }

    function getAssetFactoryAddress() external view returns (address) {return assetFactory;}
    function getWstonAddress() external view returns(address) {return wston;}

}
"""

PROFILE = AugmentationProfile(
    family="erc1155",
    description="Back an ERC1155 AssetFactory with WSTON: per-id unit value, treasury-gated minting, burn to redeem",
    base_path="contracts/AssetFactory.sol",
    derived_name="UpdatedAssetFactory",
    interfaces=(TREASURY_INTERFACE,),
    storage_block=STORAGE,
    functions_block=FUNCTIONS,
    companions=(CompanionContract(role="Treasury", source=TREASURY),)
)
